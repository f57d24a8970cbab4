"""
Dashboard PDF report
"""
import asyncio
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from farmhub.api.auth import get_current_auth_user_id
from farmhub.core.context import UserContext
from farmhub.core.database import get_db
from farmhub.models import UserProfile
from farmhub.services.dashboard import RecordStore, compute_snapshot

from .snapshot import get_record_store

router = APIRouter()


@router.get("/report.pdf")
async def download_dashboard_report(
    user_id: UUID = Depends(get_current_auth_user_id),
    store: RecordStore = Depends(get_record_store),
    db: Session = Depends(get_db),
):
    """Download the dashboard metrics and recent activity as PDF."""
    # Lazy import: ReportLab is only loaded when a report is requested
    from farmhub.utils.pdf_generator import generate_dashboard_pdf
    from farmhub.utils.pdf_layout import branding_from_profile

    profile = db.query(UserProfile).filter(UserProfile.id == user_id).first()
    snapshot = await compute_snapshot(UserContext(user_id=user_id, profile=profile), store)

    pdf_buffer = await asyncio.to_thread(generate_dashboard_pdf, snapshot, branding_from_profile(profile))
    filename = f"farmhub_dashboard_{datetime.utcnow().strftime('%Y%m%d_%H%M')}.pdf"

    return StreamingResponse(
        pdf_buffer,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
