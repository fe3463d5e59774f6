"""Tests for the Kroger image lookup, against a mocked HTTP transport."""

import httpx
import pytest

from config.settings import Settings
from controllers.shopping_controller import ShoppingController
from services.grocery_apis import KrogerAPI, NullImageSearch, get_image_search
from services.grocery_apis.base import ImageLookupError
from services.shopping_list_service import ShoppingListService

TOKEN_RESPONSE = {"access_token": "token-123", "expires_in": 1800}

PRODUCTS_RESPONSE = {
    "data": [
        {
            "productId": "0001",
            "description": "Milk Without Pictures",
            "images": [],
        },
        {
            "productId": "0002",
            "description": "Whole Milk",
            "images": [
                {
                    "perspective": "back",
                    "sizes": [{"size": "thumbnail", "url": "https://img.example/back.jpg"}],
                },
                {
                    "perspective": "front",
                    "sizes": [
                        {"size": "large", "url": "https://img.example/front-large.jpg"},
                        {"size": "thumbnail", "url": "https://img.example/front-thumb.jpg"},
                    ],
                },
            ],
        },
    ]
}


@pytest.fixture
def kroger_settings():
    return Settings(
        _env_file=None,
        kroger_client_id=" client ",
        kroger_client_secret="secret",
        kroger_location_id="70100",
    )


def make_api(settings, products=PRODUCTS_RESPONSE, token_status=200, products_status=200):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path.endswith("/connect/oauth2/token"):
            return httpx.Response(token_status, json=TOKEN_RESPONSE)
        return httpx.Response(products_status, json=products)

    api = KrogerAPI(settings=settings, transport=httpx.MockTransport(handler))
    return api, calls


@pytest.mark.asyncio
async def test_search_image_returns_front_thumbnail(kroger_settings):
    api, calls = make_api(kroger_settings)

    url = await api.search_image("milk")

    assert url == "https://img.example/front-thumb.jpg"
    search = calls[-1]
    assert search.url.params["filter.term"] == "milk"
    assert search.url.params["filter.locationId"] == "70100"
    assert search.headers["Authorization"] == "Bearer token-123"


@pytest.mark.asyncio
async def test_token_is_cached(kroger_settings):
    api, calls = make_api(kroger_settings)

    await api.search_image("milk")
    await api.search_image("bread")

    token_calls = [c for c in calls if c.url.path.endswith("/token")]
    assert len(token_calls) == 1


@pytest.mark.asyncio
async def test_no_products_returns_none(kroger_settings):
    api, _ = make_api(kroger_settings, products={"data": []})

    assert await api.search_image("unobtainium") is None


@pytest.mark.asyncio
async def test_auth_failure_raises_lookup_error(kroger_settings):
    api, _ = make_api(kroger_settings, token_status=401)

    with pytest.raises(ImageLookupError):
        await api.search_image("milk")


@pytest.mark.asyncio
async def test_search_http_error_raises_lookup_error(kroger_settings):
    api, _ = make_api(kroger_settings, products_status=500)

    with pytest.raises(ImageLookupError):
        await api.search_image("milk")


@pytest.mark.asyncio
async def test_unconfigured_raises_lookup_error():
    api = KrogerAPI(settings=Settings(_env_file=None))

    assert not api.is_configured()
    with pytest.raises(ImageLookupError):
        await api.search_image("milk")


def test_get_image_search_without_credentials():
    assert isinstance(get_image_search(Settings(_env_file=None)), NullImageSearch)


def test_get_image_search_with_credentials(kroger_settings):
    assert isinstance(get_image_search(kroger_settings), KrogerAPI)


@pytest.mark.asyncio
async def test_null_image_search_finds_nothing():
    assert await NullImageSearch().search_image("milk") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"data": None},
    [],
    {"data": "milk"},
])
async def test_unexpected_search_body_raises_lookup_error(kroger_settings, body):
    api, _ = make_api(kroger_settings, products=body)

    with pytest.raises(ImageLookupError):
        await api.search_image("milk")


@pytest.mark.asyncio
@pytest.mark.parametrize("products", [
    {"data": [{"images": None}]},
    {"data": [None, "junk", {"images": [None, {"perspective": "front", "sizes": None}]}]},
    {"data": [{"images": [{"perspective": "front", "sizes": [{"size": "thumbnail", "url": 7}]}]}]},
])
async def test_malformed_products_are_skipped(kroger_settings, products):
    api, _ = make_api(kroger_settings, products=products)

    assert await api.search_image("milk") is None


@pytest.mark.asyncio
async def test_malformed_product_before_good_one(kroger_settings):
    body = {"data": [{"images": None}, PRODUCTS_RESPONSE["data"][1]]}
    api, _ = make_api(kroger_settings, products=body)

    assert await api.search_image("milk") == "https://img.example/front-thumb.jpg"


@pytest.mark.asyncio
async def test_unexpected_token_body_raises_lookup_error(kroger_settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "a", "token"])

    api = KrogerAPI(settings=kroger_settings, transport=httpx.MockTransport(handler))

    with pytest.raises(ImageLookupError):
        await api.search_image("milk")


@pytest.mark.asyncio
async def test_add_item_survives_malformed_search_body(kroger_settings, session_factory, settings):
    api, _ = make_api(kroger_settings, products={"data": None})
    service = ShoppingListService(session_factory=session_factory, image_search=api)
    controller = ShoppingController(state={}, service=service, settings=settings)

    result = await controller.add_item("Milk", "5")

    assert result.success
    assert result.item.image_url is None
    assert not controller.is_loading()
