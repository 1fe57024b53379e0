from pathlib import Path

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from advisor.core.config import settings
from advisor.core.database import check_connection
from advisor.schemas.catalog import CatalogLoadRequest, CatalogLoadResponse, SkippedRecordOut
from advisor.schemas.course import CourseDetailResponse, CourseListResponse, CourseOut, PrereqOut
from advisor.schemas.database import DatabaseHealthResponse
from advisor.schemas.order import OrderResponse
from advisor.services.catalog import course_detail, list_sorted, recommended_order
from advisor.services.catalog_loader import LoadResult, LoadStatus
from advisor.services.store import CatalogStore, get_store

router = APIRouter(prefix="/api")


def _resolve_catalog_path(raw: str) -> Path:
    base = Path(settings.catalog_dir).resolve()
    target = (base / raw).resolve()
    if not target.is_relative_to(base):
        raise HTTPException(status_code=403, detail="Catalog path must be inside the catalog directory.")
    return target


def _load_response(result: LoadResult) -> CatalogLoadResponse:
    if result.status == LoadStatus.EMPTY:
        message = "Source contained no valid courses."
    else:
        message = f"Loaded {result.loaded} courses."
    if result.skipped:
        message += f" Skipped {len(result.skipped)} invalid line(s)."
    return CatalogLoadResponse(
        status=result.status.value,
        message=message,
        loaded=result.loaded,
        skipped=[SkippedRecordOut.model_validate(item) for item in result.skipped],
    )


@router.post("/catalog/load", response_model=CatalogLoadResponse)
def load_catalog_endpoint(
    payload: CatalogLoadRequest,
    store: CatalogStore = Depends(get_store),
):
    path = _resolve_catalog_path(payload.path)
    result = store.load_file(path, encoding=settings.catalog_encoding)
    if not result.ok:
        raise HTTPException(status_code=404, detail="Catalog source unavailable.")
    return _load_response(result)


@router.post("/catalog/upload", response_model=CatalogLoadResponse)
def upload_catalog_endpoint(
    file: UploadFile = File(...),
    store: CatalogStore = Depends(get_store),
):
    data = file.file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Catalog file is too large.")
    try:
        content = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=422, detail="Catalog file must be UTF-8 text.")
    return _load_response(store.load_text(content))


@router.get("/courses", response_model=CourseListResponse)
def list_courses_endpoint(store: CatalogStore = Depends(get_store)):
    courses = list_sorted(store.snapshot())
    return CourseListResponse(
        count=len(courses),
        courses=[CourseOut.model_validate(course) for course in courses],
    )


@router.get("/courses/{code}", response_model=CourseDetailResponse)
def get_course_endpoint(code: str, store: CatalogStore = Depends(get_store)):
    detail = course_detail(store.snapshot(), code)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Course not found: {code}")
    return CourseDetailResponse(
        code=detail.course.code,
        title=detail.course.title,
        prereqs=[
            PrereqOut(code=ref.code, title=ref.title, in_catalog=ref.title is not None)
            for ref in detail.prereqs
        ],
    )


@router.get("/order", response_model=OrderResponse)
def recommended_order_endpoint(store: CatalogStore = Depends(get_store)):
    catalog = store.snapshot()
    if not len(catalog):
        return OrderResponse(complete=True, message="No data loaded.")
    result = recommended_order(catalog)
    message = "Recommended order generated."
    if not result.complete:
        message = (
            f"Circular dependency detected: {len(result.blocked)} course(s) cannot be scheduled."
        )
    return OrderResponse(
        complete=result.complete,
        message=message,
        courses=[CourseOut.model_validate(course) for course in result.courses],
        blocked=result.blocked,
        cycles=result.cycles,
    )


@router.get("/database/health", response_model=DatabaseHealthResponse)
def database_health_endpoint():
    return DatabaseHealthResponse.model_validate(check_connection())
