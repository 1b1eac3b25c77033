"""Tests for the thread-safe bell singleton."""

import threading

import pytest

from patternbook.patterns.singleton import TheBell, run


@pytest.mark.usefixtures("fresh_bell")
class TestTheBell:
    @pytest.mark.parametrize("calls", [1, 2, 10, 100])
    def test_same_identity_on_every_call(self, calls):
        first = TheBell.get_instance()
        assert all(TheBell.get_instance() is first for _ in range(calls))

    def test_constructor_returns_shared_instance(self):
        assert TheBell() is TheBell.get_instance()

    def test_state_survives_repeated_access(self, capsys):
        TheBell.get_instance().ring()
        TheBell.get_instance().ring()

        assert TheBell.get_instance().rings == 2
        assert capsys.readouterr().out == "Ding! Order up!\nDing! Order up!\n"

    def test_concurrent_first_access_yields_one_instance(self):
        barrier = threading.Barrier(16)
        seen = []
        seen_lock = threading.Lock()

        def grab():
            barrier.wait()
            bell = TheBell.get_instance()
            with seen_lock:
                seen.append(bell)

        threads = [threading.Thread(target=grab) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 16
        assert len({id(b) for b in seen}) == 1

    def test_concurrent_construction_keeps_earlier_rings(self, capsys):
        barrier = threading.Barrier(16)

        def construct_and_ring():
            barrier.wait()
            TheBell().ring()

        threads = [threading.Thread(target=construct_and_ring) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert TheBell().rings == 16
        assert capsys.readouterr().out.count("Ding! Order up!") == 16

    def test_reset_creates_a_new_instance(self):
        first = TheBell.get_instance()
        TheBell._reset_instance()
        assert TheBell.get_instance() is not first


@pytest.mark.usefixtures("fresh_bell")
def test_demo_prints_same_identity_twice(capsys):
    run()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == lines[1] == str(id(TheBell.get_instance()))
    assert lines[2] == "Same instance: True"
    assert lines[3] == "Ding! Order up!"
