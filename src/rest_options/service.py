# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""OptionsService — runs the access gate and the restriction evaluator.

Orchestrates the lookup flow:
1. Check the API key against the stored secret
2. Validate the requested option names
3. Load the restriction policy
4. Evaluate the request against the policy
5. Return a structured envelope
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_options.exceptions import RequestError
from rest_options.gate import check_api_key
from rest_options.restrictions import RestrictionPolicy, evaluate, validate_requested
from rest_options.schema import ErrorResponse, OptionsData, StatusData, SuccessResponse

if TYPE_CHECKING:
    from rest_options.context import RequestContext
    from rest_options.result import GateResult
    from rest_options.stores.base import Store

logger = logging.getLogger(__name__)


class OptionsService:
    """Answers lookup requests against a settings store.

    The store is injected so that tests and the HTTP app share one
    instance without any module-level state.

    Example:
        service = OptionsService(InMemoryStore())
        response = await service.get_options(RequestContext(api_key="...", options=["a"]))
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def get_options(self, context: RequestContext) -> SuccessResponse | ErrorResponse:
        """Run the full lookup flow.

        Args:
            context: The decoded request

        Returns:
            SuccessResponse, or ErrorResponse for a 401 or 400 rejection

        Note:
            Request errors never propagate past this method.
        """
        try:
            return await self._get_options_internal(context)
        except RequestError as e:
            return self._error_output(e)

    async def _get_options_internal(
        self, context: RequestContext
    ) -> SuccessResponse | ErrorResponse:
        gate = await check_api_key(self._store, context.api_key)
        if not gate.allowed:
            return self._denied_output(gate)

        requested = validate_requested(context.options)
        policy = await RestrictionPolicy.load(self._store)
        options = await evaluate(requested, policy, self._store)

        logger.debug(
            "Served %d of %d requested options (mode=%s)",
            len(options),
            len(requested),
            policy.mode.value,
        )
        return SuccessResponse(data=OptionsData(options=options))

    def _error_output(self, error: RequestError) -> ErrorResponse:
        logger.info("Rejected request: %s", error.message)
        return ErrorResponse(
            code=error.code,
            message=error.message,
            data=StatusData(status=error.status),
        )

    def _denied_output(self, gate: GateResult) -> ErrorResponse:
        return ErrorResponse(
            code=gate.code,
            message=gate.message,
            data=StatusData(status=gate.status),
        )
