import asyncio

import aiohttp
import pytest
from aiohttp import web
from aiohttp import test_utils

from functionality.drops_report import fetcher as fetcher_mod
from functionality.drops_report.drops_api import fetch_drops_payload


pytestmark = pytest.mark.asyncio


PAYLOAD = [
	{
		"gameDisplayName": "Alpha",
		"rewards": [
			{
				"id": "c_active",
				"name": "Active Camp",
				"startAt": "2000-01-01T00:00:00Z",
				"endAt": "2099-02-01T00:00:00Z",
				"timeBasedDrops": [{"name": "Reward A", "requiredMinutesWatched": 30}],
			}
		],
	},
	{"gameDisplayName": "Beta", "rewards": []},
]


async def _serve(handler) -> test_utils.TestServer:
	app = web.Application()
	app.router.add_get("/drops", handler)
	server = test_utils.TestServer(app)
	await server.start_server()
	return server


async def test_fetch_payload_decodes_untyped_json():
	async def handler(_request):
		return web.Response(text='[{"gameDisplayName": "X", "rewards": []}]', content_type="text/plain")

	server = await _serve(handler)
	try:
		async with aiohttp.ClientSession() as session:
			data = await fetch_drops_payload(session, str(server.make_url("/drops")))
	finally:
		await server.close()
	assert data == [{"gameDisplayName": "X", "rewards": []}]


async def test_fetcher_builds_games_in_response_order():
	async def handler(_request):
		return web.json_response(PAYLOAD)

	server = await _serve(handler)
	try:
		games = await fetcher_mod.DropsFetcher(str(server.make_url("/drops"))).fetch_games()
	finally:
		await server.close()
	assert [g.display_name for g in games] == ["Alpha", "Beta"]
	assert games[0].drops[0].rewards[0].minutes_required == 30


async def test_fetcher_prints_progress_notice(monkeypatch, capsys):
	async def fake_payload(session, url):
		return []

	monkeypatch.setattr(fetcher_mod, "fetch_drops_payload", fake_payload)
	assert await fetcher_mod.DropsFetcher("http://unused").fetch_games() == []
	assert "fetching open drop campaigns..." in capsys.readouterr().err


async def test_non_2xx_status_is_network_error():
	async def handler(_request):
		return web.Response(status=503, text="down")

	server = await _serve(handler)
	try:
		with pytest.raises(fetcher_mod.NetworkError) as info:
			await fetcher_mod.DropsFetcher(str(server.make_url("/drops"))).fetch_games()
	finally:
		await server.close()
	assert info.value.__cause__ is not None


async def test_connection_failure_is_network_error():
	async def handler(_request):
		return web.json_response([])

	server = await _serve(handler)
	url = str(server.make_url("/drops"))
	await server.close()
	with pytest.raises(fetcher_mod.NetworkError):
		await fetcher_mod.DropsFetcher(url, timeout_seconds=5).fetch_games()


async def test_timeout_is_network_error(monkeypatch):
	async def slow_payload(session, url):
		raise asyncio.TimeoutError()

	monkeypatch.setattr(fetcher_mod, "fetch_drops_payload", slow_payload)
	with pytest.raises(fetcher_mod.NetworkError, match="timed out"):
		await fetcher_mod.DropsFetcher("http://unused").fetch_games()


async def test_invalid_json_is_decode_error():
	async def handler(_request):
		return web.Response(text="<html>not json</html>", content_type="text/html")

	server = await _serve(handler)
	try:
		with pytest.raises(fetcher_mod.DecodeError):
			await fetcher_mod.DropsFetcher(str(server.make_url("/drops"))).fetch_games()
	finally:
		await server.close()


@pytest.mark.parametrize(
	"payload",
	[
		{"games": []},
		[{"gameDisplayName": "Alpha"}],
		[{"gameDisplayName": "Alpha", "rewards": [{"name": "x", "startAt": 1, "endAt": 2, "timeBasedDrops": []}]}],
		[{"gameDisplayName": "Alpha", "rewards": [{"name": "x", "startAt": "0001-01-01T00:00:00+01:00", "endAt": "2099-01-01T00:00:00Z", "timeBasedDrops": []}]}],
		[{"gameDisplayName": "Alpha", "rewards": [{"name": "x", "startAt": "2000-01-01T00:00:00Z", "endAt": "9999-12-31T23:59:59-01:00", "timeBasedDrops": []}]}],
	],
)
async def test_schema_mismatch_is_decode_error(monkeypatch, payload):
	async def fake_payload(session, url):
		return payload

	monkeypatch.setattr(fetcher_mod, "fetch_drops_payload", fake_payload)
	with pytest.raises(fetcher_mod.DecodeError) as info:
		await fetcher_mod.DropsFetcher("http://unused").fetch_games()
	assert isinstance(info.value.__cause__, (TypeError, ValueError))
