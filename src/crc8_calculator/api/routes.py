"""API route handlers."""

from fastapi import APIRouter, Depends, HTTPException

from crc8_calculator.api.dependencies import get_history
from crc8_calculator.core.calculator import compute_crc8, compute_crc8_grid
from crc8_calculator.core.history import CalculationHistory
from crc8_calculator.core.models import (
    CRC8_MAXIM,
    AlgorithmInfoResponse,
    CalculateRequest,
    ComputationResult,
    ErrorResponse,
    ExamplesResponse,
    GridCalculateRequest,
    HistoryClearResponse,
    HistoryEntry,
)
from crc8_calculator.protocol.codec import cells_to_hex
from crc8_calculator.protocol.constants import EXAMPLES, InputFormat

router = APIRouter(prefix="/api")


@router.get("/algorithm", response_model=AlgorithmInfoResponse)
async def get_algorithm():
    """Get the parameters of the checksum algorithm."""
    return AlgorithmInfoResponse(
        name=CRC8_MAXIM.name,
        polynomial=CRC8_MAXIM.polynomial,
        polynomial_hex=f"0x{CRC8_MAXIM.polynomial:X}",
        initial_value=CRC8_MAXIM.initial_value,
    )


@router.post(
    "/crc8",
    response_model=ComputationResult,
    responses={400: {"model": ErrorResponse}},
)
async def calculate(
    request: CalculateRequest,
    history: CalculationHistory = Depends(get_history),
):
    """Compute the checksum of hex or text input."""
    result = compute_crc8(request.data, request.format)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error_message)

    await history.add(result, request.data, request.format)
    return result


@router.post(
    "/crc8/grid",
    response_model=ComputationResult,
    responses={400: {"model": ErrorResponse}},
)
async def calculate_grid(
    request: GridCalculateRequest,
    history: CalculationHistory = Depends(get_history),
):
    """Compute the checksum of a hex byte grid, using filled cells only."""
    result = compute_crc8_grid(request.cells)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error_message)

    await history.add(result, cells_to_hex(request.cells), InputFormat.HEX)
    return result


@router.get("/history", response_model=list[HistoryEntry])
async def get_history_entries(
    history: CalculationHistory = Depends(get_history),
):
    """Get recent computations, newest first."""
    return await history.get_all()


@router.get(
    "/history/{index}",
    response_model=HistoryEntry,
    responses={404: {"model": ErrorResponse}},
)
async def get_history_entry(
    index: int,
    history: CalculationHistory = Depends(get_history),
):
    """Get one remembered computation (0 = newest) to reload its input and result."""
    entry = await history.get(index)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"History entry not found: {index}")
    return entry


@router.delete("/history", response_model=HistoryClearResponse)
async def clear_history(
    history: CalculationHistory = Depends(get_history),
):
    """Remove all remembered computations."""
    cleared = await history.clear()
    return HistoryClearResponse(cleared=cleared)


@router.get("/examples", response_model=ExamplesResponse)
async def get_examples():
    """Get sample hex byte grids."""
    return ExamplesResponse(examples=EXAMPLES)
