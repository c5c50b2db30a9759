import pytest

from conftest import FakeAlbumService, album_titles

import gphotos_albums.__main__ as cli
from gphotos_albums.client import GalleryClient
from gphotos_albums.photos.errors import AuthenticationError, CacheBackendError


@pytest.fixture
def fake_service(monkeypatch):
    service = FakeAlbumService(album_titles(3))

    def from_config(config):
        return GalleryClient(service, page_size=config.page_size)

    monkeypatch.setattr(cli.GalleryClient, "from_config", staticmethod(from_config))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.delenv("GPHOTOS_PAGE_SIZE", raising=False)
    return service


def test_list(fake_service, capsys):
    assert cli.main(["list"]) == 0

    assert capsys.readouterr().out.splitlines() == ["id-1\talbum-1", "id-2\talbum-2", "id-3\talbum-3"]
    assert fake_service.closed


def test_find(fake_service, capsys):
    assert cli.main(["find", "album-2"]) == 0
    assert capsys.readouterr().out == "id-2\talbum-2\n"


def test_find_missing(fake_service, capsys):
    assert cli.main(["find", "nope"]) == 1
    assert "album not found" in capsys.readouterr().err


def test_create(fake_service, capsys):
    assert cli.main(["create", "new"]) == 0
    assert capsys.readouterr().out == "created-1\tnew\n"
    assert fake_service.create_calls == ["new"]


def test_remote_failure(fake_service, capsys):
    assert cli.main(["create", "should-fail"]) == 1
    assert "album creation failure" in capsys.readouterr().err


def test_authentication_failure(monkeypatch, capsys):
    def from_config(config):
        raise AuthenticationError("no token")

    monkeypatch.setattr(cli.GalleryClient, "from_config", staticmethod(from_config))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)

    assert cli.main(["list"]) == 2
    assert "no token" in capsys.readouterr().err


class FailingCache:
    def get_album(self, key):
        raise CacheBackendError("disk gone")

    def put_album(self, key, album, ttl):
        raise CacheBackendError("disk gone")

    def invalidate_album(self, key):
        raise CacheBackendError("disk gone")


class ExpiredSessionService(FakeAlbumService):
    def list_albums(self, page_size, page_token=""):
        raise AuthenticationError("refresh failed")


def use_client(monkeypatch, client):
    monkeypatch.setattr(cli.GalleryClient, "from_config", staticmethod(lambda config: client))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.delenv("GPHOTOS_PAGE_SIZE", raising=False)


def test_cache_backend_failure(monkeypatch, capsys):
    service = FakeAlbumService(album_titles(3))
    use_client(monkeypatch, GalleryClient(service, cache=FailingCache()))

    assert cli.main(["find", "album-1"]) == 1
    assert "disk gone" in capsys.readouterr().err
    assert service.list_calls == []


def test_authentication_failure_during_command(monkeypatch, capsys):
    service = ExpiredSessionService()
    use_client(monkeypatch, GalleryClient(service))

    assert cli.main(["list"]) == 2
    assert "refresh failed" in capsys.readouterr().err
    assert service.closed
