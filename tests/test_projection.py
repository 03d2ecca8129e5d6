"""Tests for raw container -> ContainerView projection."""

from __future__ import annotations

from docker_status.models import PortMapping, RawContainer
from docker_status.services.projection import display_name, project_container


class TestDisplayName:
    def test_strips_leading_slash(self):
        assert display_name(["/web"]) == "web"

    def test_multiple_names_joined(self):
        # Only the first character of the joined string is dropped
        assert display_name(["/web", "/alias"]) == "web /alias"

    def test_empty_names(self):
        assert display_name([]) == ""


class TestProjectContainer:
    def test_fields_copied(self, make_raw):
        view = project_container(make_raw("abc123", name="web", state="exited"), "http://h")
        assert view.id == "abc123"
        assert view.name == "web"
        assert view.status == "exited"
        assert view.ports == []

    def test_status_passed_through(self, make_raw):
        view = project_container(make_raw("abc", state="restarting"), "http://h")
        assert view.status == "restarting"

    def test_zero_public_ports_dropped(self):
        raw = RawContainer(
            id="abc",
            names=["/web"],
            state="running",
            ports=[
                PortMapping(public_port=0),
                PortMapping(public_port=8080),
                PortMapping(public_port=0),
                PortMapping(public_port=443),
            ],
        )
        assert project_container(raw, "http://h").ports == ["http://h:8080", "http://h:443"]

    def test_missing_public_port_dropped(self, make_raw):
        view = project_container(make_raw("abc", public_ports=[0, 9000]), "https://dash.example.com")
        assert view.ports == ["https://dash.example.com:9000"]

    def test_no_names(self):
        view = project_container(RawContainer(id="abc", state="created"), "http://h")
        assert view.name == ""
