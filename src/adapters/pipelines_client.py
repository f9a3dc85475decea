"""Cliente HTTP del API de pipelines del ATC.

Traduce cada operación lógica a un único request HTTP e interpreta el status:

- 2xx/3xx: éxito (`True`, o el cuerpo decodificado).
- 404: ausencia; devuelve `None`/`False` y no es un error.
- Cualquier otro status: lanza `UnexpectedResponseError` con la línea de status.

No hay reintentos ni backoff. El único estado es el `httpx.Client`, que es
seguro para uso concurrente desde varios threads.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters import routes
from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import Pipeline, RenameRequest
from core.errors import ResponseDecodeError, UnexpectedResponseError

logger = logging.getLogger(__name__)

_PIPELINE_LIST = TypeAdapter(list[Pipeline])


class PipelineClient:
    """Implementación de `core.interfaces.PipelineAPI` sobre httpx."""

    def __init__(
        self,
        http: httpx.Client | None = None,
        *,
        settings: AppSettings | None = None,
        base_url: str | None = None,
    ) -> None:
        """Usa `http` tal cual si se inyecta; si no, construye uno desde `settings`.

        `base_url` sobreescribe `settings.atc_url` (p.ej. el flag `--url` de la CLI).
        """

        self._owns_http = http is None
        self._http = http if http is not None else build_client(settings, base_url=base_url)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    def close(self) -> None:
        """Cierra el `httpx.Client` solo si lo creó este cliente."""

        if self._owns_http:
            self._http.close()

    def __enter__(self) -> PipelineClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Operaciones
    # ------------------------------------------------------------------ #

    def pause_pipeline(self, name: str) -> bool:
        response = self._send(routes.PAUSE_PIPELINE, pipeline_name=name)
        return self._found(response)

    def unpause_pipeline(self, name: str) -> bool:
        response = self._send(routes.UNPAUSE_PIPELINE, pipeline_name=name)
        return self._found(response)

    def get_pipeline(self, name: str) -> Pipeline | None:
        """Devuelve el pipeline, o `None` si el ATC responde 404."""

        response = self._send(routes.GET_PIPELINE, pipeline_name=name)
        if not self._found(response):
            return None
        payload = self._json(response)
        try:
            return Pipeline.model_validate(payload)
        except ValidationError as exc:
            raise ResponseDecodeError(url=str(response.request.url), cause=exc) from exc

    def list_pipelines(self) -> list[Pipeline]:
        """Devuelve todos los pipelines en el orden que envía el servidor.

        No hay caso "no encontrado": un 404 aquí es un fallo.
        """

        response = self._send(routes.LIST_PIPELINES)
        if not _is_success(response):
            raise self._unexpected(response)
        payload = self._json(response)
        try:
            return _PIPELINE_LIST.validate_python(payload)
        except ValidationError as exc:
            raise ResponseDecodeError(url=str(response.request.url), cause=exc) from exc

    def delete_pipeline(self, name: str) -> bool:
        response = self._send(routes.DELETE_PIPELINE, pipeline_name=name)
        return self._found(response)

    def rename_pipeline(self, old_name: str, new_name: str) -> bool:
        body = RenameRequest(name=new_name).model_dump_json()
        response = self._send(
            routes.RENAME_PIPELINE,
            pipeline_name=old_name,
            content=body,
            headers={"Content-Type": "application/json"},
        )
        return self._found(response)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _send(
        self,
        route: routes.Route,
        *,
        content: str | None = None,
        headers: dict[str, str] | None = None,
        **params: str,
    ) -> httpx.Response:
        path = route.build(**params)
        response = self._http.request(route.method, path, content=content, headers=headers)
        logger.debug("%s %s -> %s", route.method, response.request.url, response.status_code)
        return response

    def _found(self, response: httpx.Response) -> bool:
        if _is_success(response):
            return True
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        raise self._unexpected(response)

    @staticmethod
    def _unexpected(response: httpx.Response) -> UnexpectedResponseError:
        request = response.request
        logger.warning(
            "unexpected status from %s %s: %s %s",
            request.method,
            request.url,
            response.status_code,
            response.reason_phrase,
        )
        return UnexpectedResponseError(
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            # JSONDecodeError y UnicodeDecodeError (cuerpo que no es UTF-8).
            raise ResponseDecodeError(url=str(response.request.url), cause=exc) from exc


def _is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 400
