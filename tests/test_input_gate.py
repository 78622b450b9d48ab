from textcheck.services.input_gate import counter_text, is_eligible, on_input


class TestEligibility:
    def test_short_text_is_rejected(self):
        assert not is_eligible("a" * 99)

    def test_exactly_minimum_is_accepted(self):
        assert is_eligible("a" * 100)

    def test_whitespace_does_not_count(self):
        assert not is_eligible("   " + "a" * 99 + "\n\n\t  ")

    def test_none_and_empty(self):
        assert not is_eligible(None)
        assert not is_eligible("")


class TestCounter:
    def test_counter_reports_raw_length(self):
        assert counter_text("  abc  ") == "7 / 25000 Characters"

    def test_long_input_is_not_truncated(self):
        state = on_input("x" * 30000)
        assert state.length == 30000
        assert state.counter_text == "30000 / 25000 Characters"
        assert state.eligible

    def test_any_change_hides_results(self):
        assert on_input("short").results_hidden
        assert on_input("y" * 200).results_hidden
