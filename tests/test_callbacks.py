import pytest

from flagparse import CallbackError, FlagParser, ParseResult


class TestCall:
    """Test suite for running callbacks of triggered flags."""

    def test_only_triggered_flags_called_in_registration_order(self):
        calls = []

        def record(flag):
            calls.append(flag.name)
            return ParseResult.success()

        parser = FlagParser(["-c", "-a", "-b=1"])
        parser.add_flag("a", value=False, callback=record)
        parser.add_flag("b", value=0, callback=record)
        parser.add_flag("c", value=False, callback=record)
        parser.add_flag("d", value=False, callback=record)

        assert parser.parse().ok
        assert parser.call().ok
        assert calls == ["a", "b", "c"]

    def test_callback_receives_flag_with_parsed_value(self):
        seen = {}

        def capture(flag):
            seen["value"] = flag.value

        parser = FlagParser(["-out", "file.txt"])
        parser.add_flag("out", value="", callback=capture)
        parser.parse()
        assert parser.call().ok
        assert seen == {"value": "file.txt"}

    def test_first_failure_stops_remaining_callbacks(self):
        calls = []

        def fail(flag):
            calls.append(flag.name)
            return ParseResult.failure(flag.name, "refused")

        def record(flag):
            calls.append(flag.name)

        parser = FlagParser(["-a", "-b", "-c"])
        parser.add_flag("a", value=False, callback=record)
        parser.add_flag("b", value=False, callback=fail)
        parser.add_flag("c", value=False, callback=record)
        parser.parse()

        result = parser.call()
        assert result == ParseResult.failure("b", "refused")
        assert calls == ["a", "b"]

        with pytest.raises(CallbackError) as exc_info:
            result.raise_for_error()
        assert exc_info.value.flag_id == "b"
        assert exc_info.value.message == "refused"

    def test_closures_capture_state(self):
        class Counter:
            total = 0

        counter = Counter()

        def add(flag):
            counter.total += flag.value

        parser = FlagParser(["-n", "2.5"])
        parser.add_flag("n", value=0, callback=add)
        parser.parse()
        parser.call()
        assert counter.total == 2.5

    def test_no_callbacks(self):
        parser = FlagParser(["-x"])
        parser.add_flag("x", value=False)
        parser.parse()
        assert parser.call() == ParseResult.success()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
