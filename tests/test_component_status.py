"""
Tests for the components command.
"""

import pytest

from statuspage.common import ComponentNotFoundError, ValidationError
from statuspage.components import COMPONENT_STATUSES, components, match_component_status

from conftest import FakeResponse


class TestMatchComponentStatus:
    def test_fragment(self):
        assert match_component_status("major") == "major outage"

    def test_case_insensitive(self):
        assert match_component_status("DEGRADED") == "degraded performance"

    def test_first_canonical_match_wins(self):
        # "outage" is in both partial and major outage.
        assert match_component_status("outage") == "partial outage"

    def test_invalid_lists_all_statuses(self):
        with pytest.raises(ValidationError) as excinfo:
            match_component_status("flying")
        message = str(excinfo.value)
        assert "flying" in message
        for status in COMPONENT_STATUSES:
            assert status in message


class TestListComponents:
    def test_dumps_full_listing(self, client, registry, capsys):
        components(client, registry)
        out = capsys.readouterr().out
        assert "name: Website" in out
        assert "name: Web API" in out
        assert "status: major_outage" in out


class TestShowComponent:
    def test_prints_status(self, client, registry, capsys):
        components(client, registry, "mail")
        assert capsys.readouterr().out == "Status of Email Delivery: degraded performance\n"

    def test_unknown_component_stops_before_status_fetch(self, client, registry, session):
        with pytest.raises(ComponentNotFoundError):
            components(client, registry, "billing")
        # Only the listing fetched while building the registry.
        assert len(session.calls) == 1


class TestChangeComponentStatus:
    @pytest.fixture
    def patched(self, session):
        session.routes[("PATCH", "/components/c1.json")] = FakeResponse(
            {"id": "c1", "name": "Website", "status": "partial_outage"}
        )
        return session

    def test_patches_matched_status(self, client, registry, patched, capsys):
        components(client, registry, "site", "partial")
        call = patched.calls_to("PATCH")[0]
        assert call["url"].endswith("/components/c1.json")
        assert call["data"] == {"component[status]": "partial_outage"}
        assert capsys.readouterr().out == "Status for Website is now partial outage\n"

    def test_extra_arguments_ignored(self, client, registry, patched):
        components(client, registry, "site", "partial", "ignored")
        assert len(patched.calls_to("PATCH")) == 1

    def test_invalid_status_issues_no_patch(self, client, registry, session):
        with pytest.raises(ValidationError):
            components(client, registry, "site", "flying")
        assert session.calls_to("PATCH") == []

    def test_unknown_component_issues_no_patch(self, client, registry, session):
        with pytest.raises(ComponentNotFoundError):
            components(client, registry, "billing", "major")
        assert session.calls_to("PATCH") == []
