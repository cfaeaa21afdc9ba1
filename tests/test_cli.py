from decimal import Decimal

import httpx
import pytest

import hotel_search.cli as cli_mod
from hotel_search.cli import build_parser, main, render_table
from hotel_search.client.api import ListingClient
from hotel_search.config import get_settings
from hotel_search.models.hotels import HotelOut

from .test_client import make_transport


@pytest.fixture
def fake_api(monkeypatch):
    def _install(**kwargs):
        transport = make_transport(**kwargs)
        monkeypatch.setattr(
            cli_mod,
            "ListingClient",
            lambda base_url: ListingClient(base_url, transport=transport),
        )

    return _install


def run_browse(argv):
    args = build_parser().parse_args(["browse", "--api-url", "http://testserver/api", *argv])
    return args.func(args)


def test_render_table_formats_price():
    hotels = [HotelOut(id=1, name="Grand", city_id=1, city_name="Paris", capacity=50, price=Decimal("120"))]
    lines = render_table("hotels", hotels)

    assert lines[0].split() == ["ID", "Name", "City", "Capacity", "Price"]
    assert set(lines[1].replace(" ", "")) == {"-"}
    assert lines[2].split() == ["1", "Grand", "Paris", "50", "$120.00"]


def test_browse_prints_filtered_hotels(fake_api, capsys):
    fake_api()
    assert run_browse(["--field", "city", "--query", "par"]) == 0

    out = capsys.readouterr().out
    assert "Search through 2 hotels in 2 cities" in out
    assert "Hotels: 1 results" in out
    assert "Grand" in out
    assert "Inn" not in out


def test_browse_cities_sorted_as_served(fake_api, capsys):
    fake_api()
    assert run_browse(["--table", "cities"]) == 0

    out = capsys.readouterr().out
    assert out.index("Lyon") < out.index("Paris")


def test_browse_no_results(fake_api, capsys):
    fake_api()
    assert run_browse(["--query", "zzz"]) == 0
    assert "No results found" in capsys.readouterr().out


def test_browse_load_failure(fake_api, capsys):
    fake_api(cities=httpx.ConnectError("refused"))
    assert run_browse([]) == 1
    assert "Error connecting to server" in capsys.readouterr().out


def test_browse_rejects_field_of_other_table(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["browse", "--table", "cities", "--field", "price"])
    assert exc.value.code == 2


@pytest.fixture
def served(monkeypatch):
    calls = []
    monkeypatch.setattr(
        cli_mod.uvicorn,
        "run",
        lambda app, **kwargs: calls.append((app, kwargs)),
    )
    return calls


def run_serve(argv):
    args = build_parser().parse_args(["serve", *argv])
    return args.func(args)


def test_serve_uses_explicit_host_and_port(served):
    assert run_serve(["--host", "127.0.0.1", "--port", "0"]) == 0

    app, kwargs = served[0]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 0
    assert any(getattr(route, "path", None) == "/api/hotels" for route in app.routes)


def test_serve_defaults_to_settings(served):
    settings = get_settings()
    assert run_serve([]) == 0

    _, kwargs = served[0]
    assert kwargs["host"] == settings.HOST
    assert kwargs["port"] == settings.PORT
