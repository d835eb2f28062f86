"""
OCM API client module for interacting with the clusters management service.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from rosactl.config import Config
from rosactl.ocm.models import Cluster, ErrorResponse, MachinePool, ObjectList, User, unmarshal_list
from rosactl.utils import redact_sensitive_data

CLUSTERS_PATH = "/api/clusters_mgmt/v1/clusters"
PAGE_SIZE = 100


# Custom exceptions
class OCMError(Exception):
    """Base exception for OCM client errors."""

    def __init__(self, reason: str, status: Optional[int] = None, code: Optional[str] = None,
                 operation_id: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.status = status
        self.code = code
        self.operation_id = operation_id

    def __str__(self) -> str:
        if self.status is None:
            return self.reason
        details = f"status is {self.status}"
        if self.code:
            details += f", code is '{self.code}'"
        if self.operation_id:
            details += f", operation identifier is '{self.operation_id}'"
        return f"{self.reason} ({details})"


class OCMAuthenticationError(OCMError):
    """Exception raised for authentication errors."""
    pass


class OCMConnectionError(OCMError):
    """Exception raised for connection errors."""
    pass


class OCMNotFoundError(OCMError):
    """Exception raised when a requested object is not found."""
    pass


class OCMClient:
    """Client for interacting with the OCM clusters management API."""

    def __init__(self, url: str, access_token: str = "", refresh_token: str = "",
                 client_id: str = "", token_url: str = "", timeout: int = 30,
                 session: Optional[requests.Session] = None):
        """Initialize the OCM client.

        Args:
            url: API server URL (e.g., 'https://api.openshift.com')
            access_token: Bearer token sent with every request
            refresh_token: Offline token exchanged for an access token when
                no access token is given
            client_id: OAuth client used for the token exchange
            token_url: SSO token endpoint
            timeout: Request timeout in seconds
            session: Optional requests session, mostly useful for tests
        """
        self.url = url.rstrip('/')
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.client_id = client_id
        self.token_url = token_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.logger = logging.getLogger(f"{__name__}.OCMClient")

    @classmethod
    def from_config(cls) -> 'OCMClient':
        """Build a client from the environment and the `ocm login` config file."""
        settings = Config.connection_settings()
        try:
            Config.validate(settings)
        except ValueError as e:
            raise OCMAuthenticationError(str(e)) from e
        return cls(**settings)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.logger.debug("Closing connection to %s", self.url)
        self.session.close()

    def _authenticate(self) -> None:
        if self.access_token:
            return
        if not self.refresh_token:
            raise OCMAuthenticationError("No access or refresh token available")
        self.logger.debug("Requesting access token from %s", self.token_url)
        try:
            response = self.session.post(
                self.token_url,
                data={
                    "grant_type": "refresh_token",
                    "client_id": self.client_id,
                    "refresh_token": self.refresh_token,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise OCMConnectionError(f"Can't connect to {self.token_url}: {e}") from e
        if response.status_code != 200:
            raise OCMAuthenticationError(
                f"Can't get access token: {response.text}", status=response.status_code
            )
        try:
            self.access_token = response.json()["access_token"]
        except (ValueError, KeyError, TypeError) as e:
            raise OCMAuthenticationError(
                f"Can't get access token: unexpected response from {self.token_url}", status=response.status_code
            ) from e

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self._authenticate()
        url = f"{self.url}{path}"
        self.logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                headers={"Authorization": f"Bearer {self.access_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise OCMConnectionError(f"Can't send request to {url}: {e}") from e

        body = self._decode(response)
        self.logger.debug("Response %s: %s", response.status_code, redact_sensitive_data(body))
        if response.status_code >= 400:
            raise self._error(response.status_code, body)
        return body

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            if response.status_code >= 400:
                return {"reason": response.text}
            raise OCMError(
                "Can't decode response: body is not JSON", status=response.status_code
            ) from e

    @staticmethod
    def _error(status: int, body: Dict[str, Any]) -> OCMError:
        detail = ErrorResponse.model_validate(body if isinstance(body, dict) else {})
        reason = detail.reason or f"Request failed with status {status}"
        error_cls = OCMError
        if status in (401, 403):
            error_cls = OCMAuthenticationError
        elif status == 404:
            error_cls = OCMNotFoundError
        return error_cls(reason, status=status, code=detail.code, operation_id=detail.operation_id)

    @staticmethod
    def _parse(model, data):
        try:
            return model.model_validate(data)
        except ValueError as e:
            raise OCMError(f"Can't decode {model.__name__} from response: {e}") from e

    @staticmethod
    def _parse_list(model, items):
        try:
            return unmarshal_list(model, items)
        except ValueError as e:
            raise OCMError(f"Can't decode list of {model.__name__} from response: {e}") from e

    def _list_all(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Read every page of a collection."""
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            query = dict(params or {}, page=page, size=PAGE_SIZE)
            result = self._parse(ObjectList, self._request("GET", path, params=query))
            items.extend(result.items)
            if len(result.items) < PAGE_SIZE or (result.total and len(items) >= result.total):
                return items
            page += 1

    def get_cluster(self, cluster_key: str, creator: Optional[str] = None,
                    product_id: Optional[str] = None) -> Cluster:
        """
        Get a cluster by its identifier, name or external identifier.

        Args:
            cluster_key: Name, id or external id of the cluster
            creator: ARN of the AWS identity that created the cluster, if the
                lookup should be restricted to it
            product_id: Product the cluster belongs to

        Returns:
            The single matching cluster

        Raises:
            OCMNotFoundError: if no cluster matches
            OCMError: if more than one cluster matches or the request fails
        """
        query = f"product.id = '{product_id or Config.ROSA_PRODUCT_ID}'"
        if creator:
            query += f" AND properties.rosa_creator_arn = '{creator}'"
        query += f" AND (id = '{cluster_key}' OR name = '{cluster_key}' OR external_id = '{cluster_key}')"

        result = self._parse(
            ObjectList, self._request("GET", CLUSTERS_PATH, params={"search": query, "page": 1, "size": 1})
        )
        if result.total == 0 or not result.items:
            raise OCMNotFoundError(f"There is no cluster with identifier or name '{cluster_key}'")
        if result.total > 1:
            raise OCMError(f"There are {result.total} clusters with identifier or name '{cluster_key}'")
        return self._parse(Cluster, result.items[0])

    def get_machine_pools(self, cluster_id: str) -> List[MachinePool]:
        path = f"{CLUSTERS_PATH}/{quote(cluster_id)}/machine_pools"
        return self._parse_list(MachinePool, self._list_all(path))

    def delete_machine_pool(self, cluster_id: str, machine_pool_id: str) -> None:
        path = f"{CLUSTERS_PATH}/{quote(cluster_id)}/machine_pools/{quote(machine_pool_id)}"
        self._request("DELETE", path)

    def get_users(self, cluster_id: str, group: str) -> List[User]:
        """List the users of a cluster group such as 'dedicated-admins'."""
        path = f"{CLUSTERS_PATH}/{quote(cluster_id)}/groups/{quote(group)}/users"
        return self._parse_list(User, self._list_all(path))
