"""
Test cases for the route exception decorator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException

from api.routes.exception import handle_exceptions
from engine.errors import EmptySeriesError


def test_sync_wrapper_translates_errors():
    @handle_exceptions
    def boom():
        raise RuntimeError("kaput")

    @handle_exceptions
    def empty():
        raise EmptySeriesError("series must contain at least one sample")

    with pytest.raises(HTTPException) as exc:
        boom()
    assert exc.value.status_code == 500
    assert exc.value.detail == "kaput"

    with pytest.raises(HTTPException) as exc:
        empty()
    assert exc.value.status_code == 422


@pytest.mark.asyncio
async def test_async_wrapper_passes_http_exceptions_through():
    @handle_exceptions
    async def teapot():
        raise HTTPException(status_code=418, detail="short and stout")

    with pytest.raises(HTTPException) as exc:
        await teapot()
    assert exc.value.status_code == 418
