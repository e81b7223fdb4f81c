import pytest

from chef_helpers import Node, StaticDirectory


@pytest.fixture()
def fleet():
    return [
        Node("web01", "prod", {"role": "web", "ipaddress": "10.0.1.11"}),
        Node("web02", "prod", {"role": "web", "ipaddress": "10.0.1.12"}),
        Node("db01", "prod", {"role": "db", "ipaddress": "10.0.2.21"}),
        Node("db02", "staging", {"role": "db", "ipaddress": "10.1.2.21"}),
        Node("bastion", "_default", {"ipaddress": "192.0.2.5"}),
    ]


@pytest.fixture()
def directory(fleet):
    return StaticDirectory(fleet)


class RecordingDirectory(StaticDirectory):
    """Static directory that fails on demand."""

    def __init__(self, nodes=None, fail_on=None):
        super().__init__(nodes)
        self.fail_on = fail_on

    def search(self, query):
        if query == self.fail_on:
            raise ConnectionError(f"backend down for {query}")
        return super().search(query)


@pytest.fixture()
def recording_directory_cls():
    return RecordingDirectory
