from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from tooltrack.dependencies import get_inventory
from tooltrack.schemas.certificate import CertificateFailure
from tooltrack.services.inventory_api import InventoryAPI

router = APIRouter(prefix="/api/certificates", tags=["certificates"])


@router.get("/{tool_id}", responses={404: {"model": CertificateFailure}})
async def download_certificate(tool_id: str, inventory: InventoryAPI = Depends(get_inventory)):
    result = await inventory.download_calibration_certificate(tool_id)
    if isinstance(result, CertificateFailure):
        return JSONResponse(status_code=404, content=result.model_dump(mode="json"))
    return Response(
        content=result.document,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={result.filename}"},
    )
