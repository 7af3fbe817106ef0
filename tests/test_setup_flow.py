import pytest

from weather_cli.errors import NetworkError
from weather_cli.setup_flow import keep_or_replace, prompt, read_line, run_setup
from weather_cli.store import Config


class StubGeocoder:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def resolve(self, zip_code, api_key):
        self.calls.append((zip_code, api_key))
        if self.error is not None:
            raise self.error
        return self.result


def answers(*lines):
    it = iter(lines)
    return lambda _label: next(it)


@pytest.mark.parametrize(
    "current, raw, expected",
    [
        ("metric", "", "metric"),
        ("metric", "   ", "metric"),
        ("metric", "imperial", "imperial"),
        ("metric", "  standard \n", "standard"),
        ("", "", ""),
    ],
)
def test_keep_or_replace(current, raw, expected):
    assert keep_or_replace(current, raw) == expected


def test_prompt_shows_current_value():
    seen = []

    def read(label):
        seen.append(label)
        return ""

    assert prompt("Units", "metric", read) == "metric"
    assert seen == ["Units [metric]: "]


def test_full_setup_updates_everything(capsys):
    cfg = Config()
    geocoder = StubGeocoder(result=(39.53, -119.81))

    run_setup(cfg, geocoder, answers("NEWKEY", "metric", "89501"))

    assert cfg == Config(api_key="NEWKEY", latitude=39.53, longitude=-119.81, units="metric")
    # the freshly entered key is used for the lookup
    assert geocoder.calls == [("89501", "NEWKEY")]
    assert "39.5300, -119.8100" in capsys.readouterr().out


def test_blank_answers_keep_config_and_skip_geocoding():
    cfg = Config(api_key="K", latitude=1.0, longitude=2.0, units="metric")
    geocoder = StubGeocoder(result=(9.0, 9.0))

    run_setup(cfg, geocoder, answers("", "", ""))

    assert cfg == Config(api_key="K", latitude=1.0, longitude=2.0, units="metric")
    assert geocoder.calls == []


def test_failed_zip_lookup_keeps_coordinates(capsys):
    cfg = Config(api_key="K", latitude=1.0, longitude=2.0, units="metric")
    geocoder = StubGeocoder(error=NetworkError("boom"))

    run_setup(cfg, geocoder, answers("", "imperial", "00000"))

    assert (cfg.latitude, cfg.longitude) == (1.0, 2.0)
    assert cfg.units == "imperial"
    assert "boom" in capsys.readouterr().err


def test_end_of_input_keeps_remaining_values():
    cfg = Config(api_key="K", latitude=1.0, longitude=2.0, units="metric")
    geocoder = StubGeocoder(result=(9.0, 9.0))
    replies = iter(["NEWKEY"])

    def read(_label):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    run_setup(cfg, geocoder, read)

    assert cfg == Config(api_key="NEWKEY", latitude=1.0, longitude=2.0, units="metric")
    assert geocoder.calls == []


def test_read_line_treats_eof_as_blank():
    def read(_label):
        raise EOFError

    assert read_line("Units: ", read) == ""
    assert prompt("Units", "metric", read) == "metric"
