"""Tests for the observable generation state."""

import threading

from csvrender.services import GenerationState


class TestGenerationState:
    """Tests for GenerationState."""

    def test_initial_values(self):
        state = GenerationState()
        assert state.is_loading is False
        assert state.progress == 0.0

    def test_subscribers_receive_current_value(self):
        state = GenerationState()
        loading, progress = [], []
        state.subscribe_loading(loading.append)
        state.subscribe_progress(progress.append)

        assert loading == [False]
        assert progress == [0.0]

    def test_try_begin_is_exclusive(self):
        state = GenerationState()
        assert state.try_begin() is True
        assert state.try_begin() is False
        assert state.is_loading is True

    def test_try_begin_resets_progress(self):
        state = GenerationState()
        state.try_begin()
        state.set_progress(0.8)
        state.finish()

        state.try_begin()
        assert state.progress == 0.0

    def test_progress_never_decreases(self):
        state = GenerationState()
        values = []
        state.subscribe_progress(values.append)
        state.try_begin()

        state.set_progress(0.5)
        state.set_progress(0.3)
        state.set_progress(0.5)
        state.set_progress(0.9)

        assert state.progress == 0.9
        assert values == [0.0, 0.0, 0.5, 0.9]

    def test_progress_clamped(self):
        state = GenerationState()
        state.set_progress(3.0)
        assert state.progress == 1.0

    def test_finish_notifies_once(self):
        state = GenerationState()
        loading = []
        state.subscribe_loading(loading.append)

        state.try_begin()
        state.finish()
        state.finish()

        assert loading == [False, True, False]

    def test_unsubscribe(self):
        state = GenerationState()
        values = []
        unsubscribe = state.subscribe_progress(values.append)
        unsubscribe()
        state.set_progress(0.5)

        assert values == [0.0]

    def test_failing_listener_does_not_break_others(self):
        state = GenerationState()
        received = []

        def broken(_value):
            raise RuntimeError("listener failed")

        state.subscribe_loading(broken)
        state.subscribe_loading(received.append)
        assert state.try_begin() is True

        assert received == [False, True]

    def test_concurrent_try_begin_single_winner(self):
        state = GenerationState()
        barrier = threading.Barrier(8)
        results = []

        def contender():
            barrier.wait()
            results.append(state.try_begin())

        threads = [threading.Thread(target=contender) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1
