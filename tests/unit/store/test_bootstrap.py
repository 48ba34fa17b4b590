"""Unit tests for bootstrap payload parsing."""

from __future__ import annotations

import pytest

from flagstore.kernel.errors import ValidationError
from flagstore.store import BootstrapError, FlagRecord, FlagStore, parse_bootstrap
from flagstore.testing import make_bootstrap


class TestParseBootstrap:
    def test_client_state_shape(self) -> None:
        payload = make_bootstrap(
            {
                "dark-mode": {
                    "value": True,
                    "version": 4,
                    "variation": 0,
                    "reason": {"kind": "OFF"},
                    "trackEvents": True,
                    "debugEventsUntilDate": 1000,
                }
            }
        )
        assert parse_bootstrap(payload) == {
            "dark-mode": FlagRecord(
                value=True,
                version=4,
                variation=0,
                reason={"kind": "OFF"},
                track_events=True,
                debug_events_until_date=1000,
            )
        }

    def test_legacy_shape(self) -> None:
        assert parse_bootstrap({"a": 1, "b": "x"}) == {
            "a": FlagRecord(value=1),
            "b": FlagRecord(value="x"),
        }

    def test_metadata_keys_are_skipped(self) -> None:
        flags = parse_bootstrap({"a": 1, "$valid": True, "$flagsState": {}})
        assert set(flags) == {"a"}

    def test_flag_missing_from_state_gets_bare_record(self) -> None:
        flags = parse_bootstrap({"a": 1, "b": 2, "$flagsState": {"a": {"version": 9}}})
        assert flags["a"].version == 9
        assert flags["b"] == FlagRecord(value=2)

    def test_falsy_values_are_kept(self) -> None:
        flags = parse_bootstrap(make_bootstrap({"a": {"value": False, "version": 1}}))
        assert flags["a"].value is False

    def test_invalid_marker_logs_warning(self) -> None:
        from structlog.testing import capture_logs

        with capture_logs() as logs:
            flags = parse_bootstrap({"a": 1, "$valid": False})
        assert flags == {"a": FlagRecord(value=1)}
        assert logs[0]["event"] == "flag_store.bootstrap_invalid"
        assert logs[0]["log_level"] == "warning"

    def test_non_mapping_payload_raises(self) -> None:
        with pytest.raises(BootstrapError) as exc_info:
            parse_bootstrap(["a", "b"])  # type: ignore[arg-type]
        assert exc_info.value.code == "invalid_bootstrap"
        assert exc_info.value.detail == {"type": "list"}

    def test_non_mapping_state_raises(self) -> None:
        with pytest.raises(BootstrapError):
            parse_bootstrap({"a": 1, "$flagsState": "nope"})

    def test_bad_metadata_entries_reported(self) -> None:
        with pytest.raises(BootstrapError) as exc_info:
            parse_bootstrap({"a": 1, "b": 2, "$flagsState": {"a": 5, "b": [1]}})
        keys = [e["flag_key"] for e in exc_info.value.errors]
        assert keys == ["a", "b"]

    @pytest.mark.parametrize("reason", ["OFF", ["OFF"], 3])
    def test_non_mapping_reason_rejected(self, reason: object) -> None:
        with pytest.raises(BootstrapError) as exc_info:
            parse_bootstrap({"a": 1, "$flagsState": {"a": {"reason": reason}}})
        assert exc_info.value.errors == [{"flag_key": "a", "error": "reason must be a mapping"}]

    def test_reason_is_copied(self) -> None:
        reason = {"kind": "OFF"}
        flags = parse_bootstrap({"a": 1, "$flagsState": {"a": {"reason": reason}}})
        assert flags["a"].reason == reason
        assert flags["a"].reason is not reason

    def test_is_validation_error(self) -> None:
        assert issubclass(BootstrapError, ValidationError)


class TestFromBootstrap:
    def test_seeds_real_layer(self) -> None:
        store = FlagStore.from_bootstrap(make_bootstrap({"a": {"value": 1, "version": 2}}))
        assert store.get("a") == FlagRecord(value=1, version=2)
        assert store.get_overrides() == {}

    def test_forwards_keyword_options(self) -> None:
        from structlog.testing import capture_logs

        store = FlagStore.from_bootstrap({"a": 1}, log_override_changes=True)
        with capture_logs() as logs:
            store.set_override("a", 2)
        assert logs[0]["log_level"] == "info"
