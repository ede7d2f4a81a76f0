"""Unit tests: Fuel GraphQL provider (mocked requests session)."""
import unittest
from unittest.mock import MagicMock

import requests

from adapters.provider_fuel_graphql import FuelGraphQLProvider, normalize_url
from core.errors import ProviderError
from core.types import PageDirection, PaginationRequest


def _response(body, status=200):
    r = MagicMock(status_code=status)
    r.json.return_value = body
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    return r


def _session(*bodies):
    s = MagicMock()
    s.post.side_effect = [_response(b) for b in bodies]
    return s


class TestNormalizeUrl(unittest.TestCase):
    def test_bare_host_gets_scheme_and_path(self):
        self.assertEqual(normalize_url("mainnet.fuel.network"), "https://mainnet.fuel.network/v1/graphql")

    def test_existing_path_kept(self):
        self.assertEqual(
            normalize_url("fuel.liquify.com/v1/graphql"),
            "https://fuel.liquify.com/v1/graphql",
        )

    def test_explicit_scheme_kept(self):
        self.assertEqual(normalize_url("http://127.0.0.1:4000"), "http://127.0.0.1:4000/v1/graphql")

    def test_empty_rejected(self):
        with self.assertRaises(ProviderError):
            normalize_url("  ")


class TestConnect(unittest.TestCase):
    def test_connect_queries_chain(self):
        s = _session({"data": {"chain": {"name": "Ignition"}}})
        p = FuelGraphQLProvider.connect("mainnet.fuel.network", session=s)
        self.assertEqual(p.chain_name, "Ignition")
        self.assertEqual(s.post.call_args[0][0], "https://mainnet.fuel.network/v1/graphql")
        self.assertIn("chain", s.post.call_args.kwargs["json"]["query"])

    def test_connect_transport_error(self):
        s = MagicMock()
        s.post.side_effect = requests.ConnectionError("timeout")
        with self.assertRaises(ProviderError) as cm:
            FuelGraphQLProvider.connect("mainnet.fuel.network", session=s)
        self.assertIn("timeout", str(cm.exception))

    def test_connect_http_error(self):
        s = MagicMock()
        s.post.return_value = _response({}, status=502)
        with self.assertRaises(ProviderError):
            FuelGraphQLProvider.connect("mainnet.fuel.network", session=s)

    def test_graphql_errors_raised(self):
        s = _session({"errors": [{"message": "unknown field"}]})
        with self.assertRaises(ProviderError) as cm:
            FuelGraphQLProvider.connect("mainnet.fuel.network", session=s)
        self.assertEqual(str(cm.exception), "unknown field")


class TestQueries(unittest.TestCase):
    def _provider(self, *bodies):
        s = _session({"data": {"chain": {"name": "Ignition"}}}, *bodies)
        return FuelGraphQLProvider.connect("mainnet.fuel.network", session=s), s

    def test_latest_block_height(self):
        p, _ = self._provider({"data": {"chain": {"latestBlock": {"height": "12345"}}}})
        self.assertEqual(p.latest_block_height(), 12345)

    def test_latest_gas_price(self):
        p, _ = self._provider({"data": {"latestGasPrice": {"gasPrice": "1"}}})
        self.assertEqual(p.latest_gas_price(), 1)

    def test_malformed_gas_price(self):
        p, _ = self._provider({"data": {"latestGasPrice": None}})
        with self.assertRaises(ProviderError):
            p.latest_gas_price()

    def test_get_transactions_backward(self):
        body = {
            "data": {
                "transactions": {
                    "pageInfo": {
                        "hasNextPage": False,
                        "hasPreviousPage": True,
                        "startCursor": "c2",
                        "endCursor": "c1",
                    },
                    "edges": [
                        {"cursor": "c2", "node": {"id": "0x02", "status": {"__typename": "SuccessStatus"}}},
                        {"cursor": "c1", "node": {"id": "0x01", "status": {"__typename": "FailureStatus"}}},
                    ],
                }
            }
        }
        p, s = self._provider(body)
        page = p.get_transactions(PaginationRequest(cursor=None, results=10, direction=PageDirection.BACKWARD))
        self.assertEqual(s.post.call_args.kwargs["json"]["variables"], {"last": 10, "before": None})
        self.assertEqual([t.id for t in page.results], ["0x02", "0x01"])
        self.assertEqual(page.results[0].status, "Success")
        self.assertEqual(page.results[1].status, "Failure")
        self.assertEqual(page.cursor, "c2")
        self.assertTrue(page.has_previous_page)

    def test_get_transactions_forward_empty(self):
        body = {"data": {"transactions": {"pageInfo": {}, "edges": []}}}
        p, s = self._provider(body)
        page = p.get_transactions(PaginationRequest(cursor="c0", results=5, direction=PageDirection.FORWARD))
        self.assertEqual(s.post.call_args.kwargs["json"]["variables"], {"first": 5, "after": "c0"})
        self.assertEqual(page.results, [])

    def test_contract_lookup(self):
        p, _ = self._provider({"data": {"contract": None}})
        self.assertIsNone(p.contract("0x" + "00" * 32))


if __name__ == "__main__":
    unittest.main()
