"""
Tests for the observable session holder
"""

from auth.state import SessionSource, SessionState
from models.user import Role, User
from samples import make_user


class TestSessionState:
    def test_initial_state(self):
        state = SessionState()
        assert state.user is None
        assert state.loading is True
        assert state.snapshot.source is None

    def test_apply_current_epoch(self):
        state = SessionState()
        user = make_user()
        assert state.apply(user, SessionSource.LOCAL, state.epoch)
        assert state.user == user
        assert state.snapshot.source == SessionSource.LOCAL

    def test_clear_rejects_older_epoch(self):
        state = SessionState()
        epoch = state.epoch
        state.clear()
        assert not state.apply(make_user(), SessionSource.REMOTE, epoch)
        assert state.user is None

    def test_last_writer_wins_within_epoch(self):
        state = SessionState()
        epoch = state.epoch
        state.apply(make_user(role=Role.DEN), SessionSource.LOCAL, epoch)
        state.apply(make_user(role=Role.DRM), SessionSource.REMOTE, epoch)
        assert state.user.role == Role.DRM

    def test_listeners(self):
        state = SessionState()
        seen = []
        unsubscribe = state.subscribe(seen.append)

        state.apply(make_user(), SessionSource.LOCAL, state.epoch)
        state.finish_loading()
        unsubscribe()
        state.clear()

        assert len(seen) == 2
        assert isinstance(seen[0].user, User)
        assert seen[1].loading is False

    def test_finish_loading_notifies_once(self):
        state = SessionState()
        seen = []
        state.subscribe(seen.append)
        state.finish_loading()
        state.finish_loading()
        assert len(seen) == 1
