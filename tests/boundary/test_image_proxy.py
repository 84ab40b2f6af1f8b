"""
Test suite for the image proxy fetcher.

System role: Verification of host allow-listing and placeholder fallback
"""

import httpx
import pytest

from mangaverse.boundary.catalog.image_proxy import (
    IMAGE_MAX_AGE,
    PLACEHOLDER_MAX_AGE,
    ImageProxyFetcher,
    host_allowed,
    svg_placeholder,
)

ALLOWED = ("mangadex.org", "mangadex.network")


class TestHostAllowed:
    @pytest.mark.parametrize(
        "url",
        [
            "https://uploads.mangadex.org/covers/x.jpg",
            "https://mangadex.org/a.png",
            "https://abc.def.mangadex.network/data/h/1.png",
        ],
    )
    def test_allowed_hosts(self, url: str) -> None:
        assert host_allowed(url, ALLOWED)

    @pytest.mark.parametrize(
        "url",
        [
            "https://evilmangadex.org/x.jpg",
            "https://mangadex.org.evil.com/x.jpg",
            "ftp://uploads.mangadex.org/x.jpg",
            "not a url",
            "",
        ],
    )
    def test_rejected_hosts(self, url: str) -> None:
        assert not host_allowed(url, ALLOWED)


class TestSvgPlaceholder:
    def test_caption_is_escaped(self) -> None:
        svg = svg_placeholder("<b>&</b>").decode()
        assert "&lt;b&gt;&amp;&lt;/b&gt;" in svg
        assert 'width="400" height="600"' in svg


class TestFetch:
    """Upstream fetches and fallbacks."""

    async def test_fetch_returns_upstream_bytes(self) -> None:
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png"})

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))

        # Act
        image = await fetcher.fetch("https://uploads.mangadex.org/covers/x.png")
        await fetcher.close()

        # Assert
        assert str(seen[0].url) == "https://uploads.mangadex.org/covers/x.png"
        assert "Mozilla" in seen[0].headers["user-agent"]
        assert image.content == b"\x89PNG"
        assert image.media_type == "image/png"
        assert image.max_age == IMAGE_MAX_AGE
        assert not image.is_placeholder

    async def test_encoded_path_segment_is_sent_as_is(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"img")

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))
        await fetcher.fetch("https://uploads.mangadex.org/covers/a%2Fb.png")
        await fetcher.close()

        assert seen[0].url.raw_path == b"/covers/a%2Fb.png"

    async def test_missing_url_gives_placeholder(self) -> None:
        image = await ImageProxyFetcher(ALLOWED).fetch(None)

        assert image.is_placeholder
        assert image.media_type == "image/svg+xml"
        assert image.max_age == PLACEHOLDER_MAX_AGE
        assert b"No URL provided" in image.content

    async def test_disallowed_host_is_not_fetched(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("disallowed host must not be fetched")

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))
        image = await fetcher.fetch("https://example.com/x.jpg")

        assert image.is_placeholder
        assert b"Invalid URL" in image.content

    async def test_upstream_error_gives_placeholder(self) -> None:
        fetcher = ImageProxyFetcher(
            ALLOWED, transport=httpx.MockTransport(lambda request: httpx.Response(404))
        )
        image = await fetcher.fetch("https://uploads.mangadex.org/x.jpg")
        await fetcher.close()

        assert image.is_placeholder
        assert b"Image not found" in image.content

    async def test_stock_placeholder_preferred(self, tmp_path) -> None:
        stock = tmp_path / "stock.jpg"
        stock.write_bytes(b"JPEGDATA")

        image = await ImageProxyFetcher(ALLOWED, placeholder_path=str(stock)).fetch("")

        assert image.content == b"JPEGDATA"
        assert image.media_type == "image/jpeg"
        assert image.is_placeholder


class TestRedirects:
    """Redirect hops are checked against the allow-list."""

    async def test_redirect_to_internal_host_is_not_followed(self) -> None:
        # Arrange
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.host)
            if request.url.host == "uploads.mangadex.org":
                return httpx.Response(
                    302, headers={"location": "http://169.254.169.254/latest/meta-data"}
                )
            return httpx.Response(200, content=b"secret")

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))

        # Act
        image = await fetcher.fetch("https://uploads.mangadex.org/covers/x.png")
        await fetcher.close()

        # Assert
        assert seen == ["uploads.mangadex.org"]
        assert image.is_placeholder
        assert b"secret" not in image.content

    async def test_redirect_within_allowed_domains_is_followed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old.png":
                return httpx.Response(301, headers={"location": "/new.png"})
            return httpx.Response(200, content=b"moved", headers={"content-type": "image/png"})

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))
        image = await fetcher.fetch("https://uploads.mangadex.org/old.png")
        await fetcher.close()

        assert image.content == b"moved"
        assert not image.is_placeholder

    async def test_redirect_loop_gives_placeholder(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(302, headers={"location": "https://uploads.mangadex.org/loop.png"})

        fetcher = ImageProxyFetcher(ALLOWED, transport=httpx.MockTransport(handler))
        image = await fetcher.fetch("https://uploads.mangadex.org/loop.png")
        await fetcher.close()

        assert image.is_placeholder
        assert len(calls) == 4
