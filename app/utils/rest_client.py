# app/utils/rest_client.py
from typing import Any

import requests
from requests import RequestException

from app.utils.settings import REMOTE_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

NO_RESPONSE_MESSAGE = "No response received from server"


class RemoteServiceError(Exception):
    """
    Znormalizowany blad z zewnetrznego serwisu.

    payload - body odpowiedzi 1:1 gdy serwis odpowiedzial (status != 2xx),
    {"message": "No response received from server"} gdy nie bylo odpowiedzi,
    {"message": <opis>} dla kazdego innego bledu lokalnego
    """

    def __init__(self, payload: Any, status_code: int | None = None):
        self.payload = payload
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if isinstance(self.payload, dict) and "message" in self.payload:
            return str(self.payload["message"])
        return str(self.payload)


def _body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class RestClient:
    """
    Klient JSON przypiety do base_url.
    Bez retry - kazdy blad od razu wraca do wolajacego.
    Token trzymany per instancja, instancja tworzona per request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = REMOTE_TIMEOUT_SECONDS,
        token: str | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token

    def set_auth_token(self, token: str) -> None:
        self.token = token

    def remove_auth_token(self) -> None:
        self.token = None

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, path: str, data: Any = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.info(f"RestClient {method} {url}")

        try:
            resp = requests.request(
                method,
                url,
                json=data,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise RemoteServiceError({"message": NO_RESPONSE_MESSAGE}) from e
        except RequestException as e:
            raise RemoteServiceError({"message": str(e)}) from e

        if not resp.ok:
            raise RemoteServiceError(_body(resp), status_code=resp.status_code)

        return _body(resp)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, data if data is not None else {})

    def put(self, path: str, data: Any = None) -> Any:
        return self.request("PUT", path, data if data is not None else {})

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
