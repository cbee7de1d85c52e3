"""Tests for ThreadSafeSessionManager."""

import threading

import requests

from http_adapter.core.session_manager import ThreadSafeSessionManager


class TestThreadSafeSessionManager:

    def test_same_thread_same_session(self):
        manager = ThreadSafeSessionManager(requests.Session)
        assert manager.get_session() is manager.get_session()
        assert manager.get_active_sessions_count() == 1
        manager.close_all()

    def test_session_per_thread(self):
        manager = ThreadSafeSessionManager(requests.Session)
        main_session = manager.get_session()
        sessions = []

        def worker():
            sessions.append(manager.get_session())

        threads = [threading.Thread(target=worker) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(s) for s in sessions}) == 3
        assert main_session not in sessions
        manager.close_all()

    def test_close_all(self):
        closed = []

        class TrackingSession(requests.Session):
            def close(self):
                closed.append(self)
                super().close()

        manager = ThreadSafeSessionManager(TrackingSession)
        session = manager.get_session()

        manager.close_all()
        manager.close_all()

        assert closed == [session]
        assert manager.get_active_sessions_count() == 0
        assert manager.get_session() is not session
