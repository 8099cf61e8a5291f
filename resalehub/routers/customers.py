from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from resalehub.db.dal import Database
from resalehub.models.customer import CustomerIn, CustomerOut
from resalehub.routers.deps import get_db

router = APIRouter(prefix="/customers", tags=["customers"])

logger = logging.getLogger("resalehub.customers")


def _parse_ts(raw):
    if isinstance(raw, str):
        return datetime.fromisoformat(raw.replace("Z", ""))
    return raw


def _row_to_customer(row: dict) -> CustomerOut:
    return CustomerOut(
        id=int(row["id"]),
        name=row["name"],
        email=row.get("email"),
        phone=row.get("phone"),
        platform=row["platform"],
        notes=row.get("notes"),
        image=row.get("image"),
        total_purchases=int(row.get("total_purchases") or 0),
        last_purchase=_parse_ts(row.get("last_purchase")),
        created_at=_parse_ts(row["created_at"]),
        updated_at=_parse_ts(row["updated_at"]),
    )


@router.post(
    "/",
    response_model=CustomerOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a customer",
)
async def add_customer(payload: CustomerIn, db: Database = Depends(get_db)):
    try:
        customer_id = db.insert_customer(payload)
    except Exception as exc:  # pragma: no cover
        logger.exception("failed to add customer")
        raise HTTPException(
            status_code=500, detail="Failed to add customer. Please try again."
        ) from exc
    row = db.get_customer(customer_id)
    if not row:
        raise HTTPException(status_code=500, detail="customer not found after insert")
    logger.info("customer %s added (platform=%s)", customer_id, payload.platform)
    return _row_to_customer(row)


@router.get("/", response_model=List[CustomerOut], summary="List customers")
async def list_customers(
    platform: Optional[str] = Query(None, description="Filter by platform"),
    db: Database = Depends(get_db),
):
    return [_row_to_customer(r) for r in db.list_customers(platform=platform)]


@router.get("/{customer_id}", response_model=CustomerOut, summary="Get a customer")
async def get_customer(customer_id: int, db: Database = Depends(get_db)):
    row = db.get_customer(customer_id)
    if not row:
        raise HTTPException(status_code=404, detail="customer not found")
    return _row_to_customer(row)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
)
async def delete_customer(customer_id: int, db: Database = Depends(get_db)):
    if not db.delete_customer(customer_id):
        raise HTTPException(status_code=404, detail="customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
