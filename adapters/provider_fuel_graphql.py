"""
Fuel node GraphQL client: connect, block height, gas price, transaction history.
One POST per call, no retries (a failed call fails the benchmark step).
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from config import REQUEST_TIMEOUT
from core.errors import ProviderError
from core.interfaces import NodeProvider
from core.types import PageDirection, PaginationRequest, TransactionPage, TransactionSummary

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/v1/graphql"

CHAIN_QUERY = "query { chain { name } }"
BLOCK_HEIGHT_QUERY = "query { chain { latestBlock { height } } }"
GAS_PRICE_QUERY = "query { latestGasPrice { gasPrice } }"
TRANSACTIONS_QUERY = """
query Transactions($first: Int, $after: String, $last: Int, $before: String) {
  transactions(first: $first, after: $after, last: $last, before: $before) {
    pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    edges {
      cursor
      node { id status { __typename } }
    }
  }
}
"""


def normalize_url(url: str) -> str:
    """
    Bare hosts get https:// and the default GraphQL path.
    "mainnet.fuel.network" -> "https://mainnet.fuel.network/v1/graphql"
    """
    raw = (url or "").strip()
    if not raw:
        raise ProviderError("empty provider url")
    if "://" not in raw:
        raw = "https://" + raw
    parsed = urlparse(raw)
    if not parsed.netloc:
        raise ProviderError(f"invalid provider url: {url!r}")
    if parsed.path in ("", "/"):
        raw = raw.rstrip("/") + GRAPHQL_PATH
    return raw


def _status_name(status: Optional[Dict[str, Any]]) -> Optional[str]:
    """GraphQL typename -> SDK-style status: SuccessStatus -> Success."""
    if not status:
        return None
    name = status.get("__typename") or ""
    if name.endswith("Status"):
        name = name[: -len("Status")]
    return name or None


class FuelGraphQLProvider(NodeProvider):
    """
    NodeProvider backed by a fuel-core GraphQL endpoint.

    Use FuelGraphQLProvider.connect(url) rather than the constructor: connect
    normalises the url and issues one chain query so an unreachable or
    non-Fuel endpoint fails at the connection step.
    """

    def __init__(
        self,
        url: str,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = normalize_url(url)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.chain_name: Optional[str] = None

    @classmethod
    def connect(
        cls,
        url: str,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> "FuelGraphQLProvider":
        provider = cls(url, timeout=timeout, session=session)
        data = provider._query(CHAIN_QUERY)
        chain = data.get("chain") or {}
        provider.chain_name = chain.get("name")
        logger.debug("Connected to %s (chain=%s)", provider.url, provider.chain_name)
        return provider

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FuelGraphQLProvider":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ------------- HTTP helpers -------------

    def _query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        try:
            r = self.session.post(
                self.url,
                json=payload,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            body = r.json()
        except requests.RequestException as e:
            raise ProviderError(str(e)) from e
        except ValueError as e:
            raise ProviderError(f"invalid JSON from {self.url}: {e}") from e

        if not isinstance(body, dict):
            raise ProviderError(f"unexpected response from {self.url}: {body!r}")
        errors = body.get("errors")
        if errors:
            msgs = [(err.get("message") if isinstance(err, dict) else str(err)) for err in errors]
            raise ProviderError("; ".join(m for m in msgs if m) or "GraphQL error")
        data = body.get("data")
        if not isinstance(data, dict):
            raise ProviderError(f"missing data in response from {self.url}")
        return data

    # ------------- queries -------------

    def latest_block_height(self) -> int:
        data = self._query(BLOCK_HEIGHT_QUERY)
        try:
            return int(data["chain"]["latestBlock"]["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"malformed block height: {data!r}") from e

    def latest_gas_price(self) -> int:
        data = self._query(GAS_PRICE_QUERY)
        try:
            return int(data["latestGasPrice"]["gasPrice"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"malformed gas price: {data!r}") from e

    def get_transactions(self, request: PaginationRequest) -> TransactionPage:
        if request.direction == PageDirection.BACKWARD:
            variables = {"last": request.results, "before": request.cursor}
        else:
            variables = {"first": request.results, "after": request.cursor}
        data = self._query(TRANSACTIONS_QUERY, variables)

        conn = data.get("transactions")
        if not isinstance(conn, dict):
            raise ProviderError(f"malformed transactions: {data!r}")
        page_info = conn.get("pageInfo") or {}
        # fuel-core yields edges in iteration order: newest first when paging backward
        results = []
        for edge in conn.get("edges") or []:
            node = edge.get("node") or {}
            results.append(TransactionSummary(id=node.get("id", ""), status=_status_name(node.get("status"))))

        if request.direction == PageDirection.BACKWARD:
            cursor = page_info.get("startCursor")
        else:
            cursor = page_info.get("endCursor")
        return TransactionPage(
            results=results,
            cursor=cursor,
            has_next_page=bool(page_info.get("hasNextPage")),
            has_previous_page=bool(page_info.get("hasPreviousPage")),
        )

    def contract(self, contract_id: str) -> Optional[Dict[str, Any]]:
        """Contract record ({"id": ...}) or None when nothing is deployed at that id."""
        data = self._query(
            "query Contract($id: ContractId!) { contract(id: $id) { id } }",
            {"id": contract_id},
        )
        return data.get("contract")
