# ======================================================================================
# GWD KOLLAM DASHBOARD - GROUND WATER DEPARTMENT API
# VERSION: 1.0.0
# AUTHOR: Ground Water Department, Kollam - Digital Services Cell
# DESCRIPTION: Unified backend for the department work-progress dashboard. Field
#              officers submit groundwater measurements, search the record book,
#              build water level / water quality reports and export them as CSV.
#              Identity is owned by the external identity provider; this service
#              only verifies the ID tokens it issues. The intelligence features
#              (entry integrity check, report summary) run through pluggable
#              strategies; the deployed tier ships the bypass strategies only.
# ======================================================================================

# --- 1. CORE IMPORTS & SETUP ---
import enum
import json
import itertools
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Annotated, Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import (BaseModel, EmailStr, Field, ValidationError, computed_field,
                      field_validator)
from pydantic_settings import BaseSettings, NoDecode

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ======================================================================================
# 2. CORE CONFIGURATION (`core/config.py`)
# ======================================================================================
class Settings(BaseSettings):
    PROJECT_NAME: str = "GWD Kollam Dashboard"; PROJECT_VERSION: str = "1.0.0"
    DEPARTMENT_NAME: str = "Ground Water Department Kollam"
    IDENTITY_TOKEN_SECRET: str; IDENTITY_TOKEN_ALGORITHM: str = "HS256"
    IDENTITY_TOKEN_AUDIENCE: Optional[str] = None; IDENTITY_TOKEN_ISSUER: Optional[str] = None
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []
    INTEGRITY_CHECK_STRATEGY: str = "bypass"; REPORT_SUMMARY_STRATEGY: str = "bypass"
    DEPLOYMENT_TIER: str = "spark"
    INTEGRITY_PAST_ENTRIES_LIMIT: int = 10
    DASHBOARD_MONTHLY_TARGET: int = 150
    SEED_MOCK_RECORDS: bool = True
    LOG_LEVEL: str = "INFO"

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["): return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str): return json.loads(v)
        elif isinstance(v, list): return v
        raise ValueError(v)
    class Config: env_file = ".env"; case_sensitive = True
settings = Settings()
logger.setLevel(settings.LOG_LEVEL)

# ======================================================================================
# 3. API SCHEMAS (`schemas/schemas.py`)
# ======================================================================================
class ReportType(str, enum.Enum): summary="summary"; water_level="water_level"; water_quality="water_quality"

# Fields named `date` with a default rebind the name before their annotation is evaluated.
OptionalDate = Optional[date]

class RecordBase(BaseModel):
    date: date
    location: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    water_level: Optional[float] = Field(None, ge=0)
    ph: Optional[float] = Field(None, ge=0, le=14)
    conductivity: Optional[float] = Field(None, gt=0)
    remarks: Optional[str] = None

class RecordCreate(RecordBase):
    @field_validator("location", "project")
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v: raise ValueError("must not be blank")
        return v

    @field_validator("date")
    def date_not_in_future(cls, v: date) -> date:
        if v > date.today(): raise ValueError("Date of record cannot be in the future.")
        return v

class Record(RecordBase):
    id: str
    class Config: frozen = True

class RecordDraft(BaseModel):
    date: OptionalDate = None
    location: Optional[str] = None
    project: Optional[str] = None
    water_level: Optional[float] = None
    ph: Optional[float] = None
    conductivity: Optional[float] = None
    remarks: Optional[str] = None

class DateRange(BaseModel):
    start: Optional[date] = None
    end: Optional[date] = None

class FilterSpec(BaseModel):
    date_range: Optional[DateRange] = None
    location: Optional[str] = None
    project: Optional[str] = None

class SearchResponse(BaseModel): count: int; results: List[Record]

class ReportRow(BaseModel):
    date: date
    location: str
    parameter: str
    value: float
    unit: str

class ReportResponse(BaseModel):
    report_type: ReportType
    selection_filters: Dict[str, Any]
    generated_on: datetime
    row_count: int
    rows: List[ReportRow]

class IntegrityCheckRequest(BaseModel):
    new_data_entry: str = Field(..., alias="newDataEntry")
    past_entries: List[str] = Field(default_factory=list, alias="pastEntries")
    class Config: populate_by_name = True

class IntegrityVerdict(BaseModel):
    is_consistent: bool = Field(..., alias="isConsistent")
    potential_error: str = Field("", alias="potentialError")
    class Config: populate_by_name = True; frozen = True

class ReportSummaryRequest(BaseModel):
    report_text: str = Field(..., alias="reportText")
    class Config: populate_by_name = True

class SummaryResult(BaseModel):
    summary: str
    class Config: frozen = True

class AuthenticatedUser(BaseModel):
    uid: str
    email: Optional[EmailStr] = None

    @computed_field
    @property
    def display_name(self) -> str:
        return self.email.split("@")[0] if self.email else "User"

class DashboardKPI(BaseModel): total_entries:int=0; locations_monitored:int=0; active_projects:int=0; avg_water_level:Optional[float]=None; avg_ph:Optional[float]=None; latest_entry_date:Optional[date]=None
class MonthlyEntries(BaseModel): month:str; entries:int; target:int
class WaterLevelTrendPoint(BaseModel): month:str; avg_water_level:float
class DashboardResponse(BaseModel): kpis:DashboardKPI; monthly_entries:List[MonthlyEntries]; water_level_trend:List[WaterLevelTrendPoint]

# Department measurements used until the record book is backed by a real store.
MOCK_RECORDS: List[Dict[str, Any]] = [
    {"date": "2024-05-15", "location": "Well GWK-001", "project": "PMKSY-2024-KOL-03", "water_level": 5.2, "ph": 7.1, "conductivity": 320},
    {"date": "2024-05-18", "location": "Borewell XYZ-7", "project": "JJM-2024-KOL-01", "water_level": 12.5, "ph": 6.8, "conductivity": 450},
    {"date": "2024-04-20", "location": "River Bank A", "project": "NGRBA-2023-KOL-05", "water_level": 2.1, "ph": 7.5, "conductivity": 280},
    {"date": "2024-06-01", "location": "Well GWK-002", "project": "PMKSY-2024-KOL-03", "water_level": 4.9, "ph": 7.0, "conductivity": 310},
    {"date": "2023-11-10", "location": "Test Site PQR", "project": "R&D-2023-MISC-02", "water_level": 8.3, "ph": 6.5, "conductivity": 550},
]

# ======================================================================================
# 4. SERVICES (`services/*.py`)
# ======================================================================================
# 4.1. Record Store (`services/record_store.py`)
# --------------------------------------------------------------------------------------
class RecordStore:
    def __init__(self, seed: Iterable[Dict[str, Any]] = ()):
        self._records: List[Record] = []
        self._ids = itertools.count(1)
        for item in seed: self.add(RecordCreate(**item))
    def list_records(self) -> List[Record]: return list(self._records)
    def add(self, record_in: RecordCreate) -> Record:
        record = Record(id=str(next(self._ids)), **record_in.model_dump())
        self._records.append(record)
        return record
    def __len__(self) -> int: return len(self._records)

record_store = RecordStore(MOCK_RECORDS if settings.SEED_MOCK_RECORDS else ())
def get_record_store() -> RecordStore: return record_store

# --------------------------------------------------------------------------------------
# 4.2. Record Query Service (`services/query_service.py`)
# --------------------------------------------------------------------------------------
# (field, parameter label, unit) in emission order within a record.
WATER_LEVEL_PARAMETERS: Tuple[Tuple[str, str, str], ...] = (("water_level", "Water Level", "m"),)
WATER_QUALITY_PARAMETERS: Tuple[Tuple[str, str, str], ...] = (("ph", "pH", ""), ("conductivity", "Conductivity", "µS/cm"))
REPORT_PARAMETERS = {
    ReportType.water_level: WATER_LEVEL_PARAMETERS,
    ReportType.water_quality: WATER_QUALITY_PARAMETERS,
    ReportType.summary: WATER_LEVEL_PARAMETERS + WATER_QUALITY_PARAMETERS,
}
REPORT_CSV_COLUMNS = ["date", "location", "parameter", "value", "unit"]

def _contains(text: str, needle: Optional[str]) -> bool:
    return not needle or needle.lower() in text.lower()

def _in_date_range(record_date: date, date_range: Optional[DateRange]) -> bool:
    if date_range is None: return True
    if date_range.start is not None and record_date < date_range.start: return False
    if date_range.end is not None and record_date > date_range.end: return False
    return True

def filter_records(records: Sequence[Record], spec: FilterSpec) -> List[Record]:
    # Case-insensitive substring matches; inclusive date range, open on a missing endpoint.
    return [r for r in records
            if _contains(r.location, spec.location)
            and _contains(r.project, spec.project)
            and _in_date_range(r.date, spec.date_range)]

def aggregate_report(records: Sequence[Record], report_type: ReportType, date_range: Optional[DateRange] = None) -> List[ReportRow]:
    # Absent measurements produce no row.
    parameters = REPORT_PARAMETERS[ReportType(report_type)]
    rows = []
    for record in records:
        if not _in_date_range(record.date, date_range): continue
        for field_name, parameter, unit in parameters:
            value = getattr(record, field_name)
            if value is not None:
                rows.append(ReportRow(date=record.date, location=record.location, parameter=parameter, value=value, unit=unit))
    return rows

def _format_value(value: Optional[float]) -> str:
    return f"{value:g}" if value is not None else "N/A"

def render_record_text(entry: Union[Record, RecordDraft]) -> str:
    record_date = entry.date.isoformat() if entry.date else "N/A"
    return (f"Location: {entry.location or 'N/A'}, Project: {entry.project or 'N/A'}, Date: {record_date}, "
            f"Water Level: {_format_value(entry.water_level)}m, pH: {_format_value(entry.ph)}, "
            f"Conductivity: {_format_value(entry.conductivity)}µS/cm, Remarks: {entry.remarks or 'N/A'}")

def render_report_text(rows: Sequence[ReportRow]) -> str:
    return "\n".join(f"Date: {r.date.isoformat()}, Location: {r.location}, Parameter: {r.parameter}, Value: {r.value:g} {r.unit}".rstrip() for r in rows)

def report_rows_to_csv(rows: Sequence[ReportRow]) -> str:
    df = pd.DataFrame([r.model_dump() for r in rows], columns=REPORT_CSV_COLUMNS)
    return df.to_csv(index=False, float_format="%g")

def select_past_entries(records: Sequence[Record], location: Optional[str], limit: int) -> List[Record]:
    candidates = records
    if location and location.strip():
        wanted = location.strip().lower()
        candidates = [r for r in records if r.location.lower() == wanted]
    return sorted(candidates, key=lambda r: r.date, reverse=True)[:limit]

# --------------------------------------------------------------------------------------
# 4.3. Intelligence Service (`services/intelligence_service.py`)
# --------------------------------------------------------------------------------------
INTEGRITY_BYPASS_MESSAGE = "AI check bypassed for Spark plan compatibility. Data assumed consistent."
SUMMARY_BYPASS_MESSAGE = "AI summary generation is not available on the current plan. This is a placeholder summary."

class IntegrityCheckStrategy(ABC):
    name: str
    @abstractmethod
    def compare(self, new_entry: str, past_entries: Sequence[str]) -> IntegrityVerdict: ...

class ReportSummaryStrategy(ABC):
    name: str
    @abstractmethod
    def summarize(self, report_text: str) -> SummaryResult: ...

class BypassIntegrityCheck(IntegrityCheckStrategy):
    name = "bypass"
    def compare(self, new_entry: str, past_entries: Sequence[str]) -> IntegrityVerdict:
        logger.warning(f"Data integrity check is disabled: the application is deployed on the '{settings.DEPLOYMENT_TIER}' tier. Entry assumed consistent.")
        return IntegrityVerdict(is_consistent=True, potential_error=INTEGRITY_BYPASS_MESSAGE)

class BypassReportSummary(ReportSummaryStrategy):
    name = "bypass"
    def summarize(self, report_text: str) -> SummaryResult:
        logger.warning(f"Report summary generation is disabled: the application is deployed on the '{settings.DEPLOYMENT_TIER}' tier. Returning placeholder summary.")
        return SummaryResult(summary=SUMMARY_BYPASS_MESSAGE)

INTEGRITY_CHECK_STRATEGIES = {BypassIntegrityCheck.name: BypassIntegrityCheck}
REPORT_SUMMARY_STRATEGIES = {BypassReportSummary.name: BypassReportSummary}

class IntelligenceService:
    def __init__(self, integrity_strategy: str, summary_strategy: str):
        if integrity_strategy not in INTEGRITY_CHECK_STRATEGIES:
            raise ValueError(f"Unknown integrity check strategy '{integrity_strategy}'. Available: {sorted(INTEGRITY_CHECK_STRATEGIES)}")
        if summary_strategy not in REPORT_SUMMARY_STRATEGIES:
            raise ValueError(f"Unknown report summary strategy '{summary_strategy}'. Available: {sorted(REPORT_SUMMARY_STRATEGIES)}")
        self.integrity_strategy: IntegrityCheckStrategy = INTEGRITY_CHECK_STRATEGIES[integrity_strategy]()
        self.summary_strategy: ReportSummaryStrategy = REPORT_SUMMARY_STRATEGIES[summary_strategy]()
        logger.info(f"Intelligence features configured: integrity_check='{integrity_strategy}', report_summary='{summary_strategy}'.")
    async def check_integrity(self, new_entry: str, past_entries: Sequence[str]) -> IntegrityVerdict:
        return self.integrity_strategy.compare(new_entry, list(past_entries))
    async def summarize_report(self, report_text: str) -> SummaryResult:
        return self.summary_strategy.summarize(report_text)
intelligence_service = IntelligenceService(settings.INTEGRITY_CHECK_STRATEGY, settings.REPORT_SUMMARY_STRATEGY)

# --------------------------------------------------------------------------------------
# 4.4. Identity Service (`services/identity_service.py`)
# --------------------------------------------------------------------------------------
class IdentityService:
    bearer_scheme = HTTPBearer(auto_error=False)

    def verify_id_token(self, token: str) -> AuthenticatedUser:
        payload = jwt.decode(
            token, settings.IDENTITY_TOKEN_SECRET, algorithms=[settings.IDENTITY_TOKEN_ALGORITHM],
            audience=settings.IDENTITY_TOKEN_AUDIENCE, issuer=settings.IDENTITY_TOKEN_ISSUER,
            options={"verify_aud": settings.IDENTITY_TOKEN_AUDIENCE is not None})
        uid = payload.get("sub")
        if not uid: raise JWTError("Token has no subject.")
        return AuthenticatedUser(uid=uid, email=payload.get("email"))

    def get_current_user(self, credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> AuthenticatedUser:
        credentials_exception = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials", headers={"WWW-Authenticate": "Bearer"})
        if credentials is None or credentials.scheme.lower() != "bearer": raise credentials_exception
        try: return self.verify_id_token(credentials.credentials)
        except (JWTError, ValidationError) as e:
            logger.warning(f"Rejected identity token: {e}")
            raise credentials_exception
identity_service = IdentityService()

# --------------------------------------------------------------------------------------
# 4.5. Dashboard Service (`services/dashboard_service.py`)
# --------------------------------------------------------------------------------------
class DashboardService:
    def build(self, records: Sequence[Record], monthly_target: int) -> DashboardResponse:
        if not records: return DashboardResponse(kpis=DashboardKPI(), monthly_entries=[], water_level_trend=[])
        df = pd.DataFrame([r.model_dump() for r in records])
        df['date'] = pd.to_datetime(df['date'])
        df['month'] = df['date'].dt.to_period('M').astype(str)
        for col in ['water_level', 'ph']:
            df[col] = pd.to_numeric(df[col], errors='coerce')

        kpis = DashboardKPI(
            total_entries=len(df),
            locations_monitored=int(df['location'].nunique()),
            active_projects=int(df['project'].nunique()),
            avg_water_level=self._round_or_none(df['water_level'].mean()),
            avg_ph=self._round_or_none(df['ph'].mean()),
            latest_entry_date=df['date'].max().date()
        )
        monthly_counts = df.groupby('month').size().sort_index()
        monthly_entries = [MonthlyEntries(month=month, entries=int(count), target=monthly_target) for month, count in monthly_counts.items()]
        trend = df.dropna(subset=['water_level']).groupby('month')['water_level'].mean().sort_index()
        water_level_trend = [WaterLevelTrendPoint(month=month, avg_water_level=round(float(level), 2)) for month, level in trend.items()]
        return DashboardResponse(kpis=kpis, monthly_entries=monthly_entries, water_level_trend=water_level_trend)

    @staticmethod
    def _round_or_none(value) -> Optional[float]:
        return round(float(value), 2) if pd.notna(value) else None
dashboard_service = DashboardService()

# ======================================================================================
# 5. API ROUTERS (`api/*.py`)
# ======================================================================================
API_PREFIX = "/api/v1"
router_users = APIRouter(); router_dashboard = APIRouter(); router_records = APIRouter()
router_reports = APIRouter(); router_intelligence = APIRouter()

CURRENT_USER = Depends(identity_service.get_current_user)

def _date_range_from_query(start_date: Optional[date], end_date: Optional[date]) -> Optional[DateRange]:
    if start_date is None and end_date is None: return None
    return DateRange(start=start_date, end=end_date)

# --------------------------------------------------------------------------------------
# 5.1. Session Router
# --------------------------------------------------------------------------------------
@router_users.get("/users/me", response_model=AuthenticatedUser)
def read_me(current_user: AuthenticatedUser = CURRENT_USER): return current_user

# --------------------------------------------------------------------------------------
# 5.2. Dashboard Router
# --------------------------------------------------------------------------------------
@router_dashboard.get("/dashboard", response_model=DashboardResponse)
def get_dashboard_data(current_user: AuthenticatedUser = CURRENT_USER, store: RecordStore = Depends(get_record_store)):
    return dashboard_service.build(store.list_records(), settings.DASHBOARD_MONTHLY_TARGET)

# --------------------------------------------------------------------------------------
# 5.3. Records Router (data entry & search)
# --------------------------------------------------------------------------------------
@router_records.get("/records", response_model=List[Record])
def list_records(current_user: AuthenticatedUser = CURRENT_USER, store: RecordStore = Depends(get_record_store)):
    return store.list_records()

@router_records.post("/records", response_model=Record, status_code=status.HTTP_201_CREATED)
def create_record(record_in: RecordCreate, current_user: AuthenticatedUser = CURRENT_USER, store: RecordStore = Depends(get_record_store)):
    record = store.add(record_in)
    logger.info(f"Record {record.id} for '{record.location}' submitted by {current_user.email or current_user.uid}.")
    return record

@router_records.get("/records/search", response_model=SearchResponse)
def search_records(
    current_user: AuthenticatedUser = CURRENT_USER,
    store: RecordStore = Depends(get_record_store),
    location: Optional[str] = Query(None),
    project: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None)
):
    spec = FilterSpec(date_range=_date_range_from_query(start_date, end_date), location=location, project=project)
    results = filter_records(store.list_records(), spec)
    return SearchResponse(count=len(results), results=results)

@router_records.post("/records/integrity-check", response_model=IntegrityVerdict)
async def check_record_integrity(draft: RecordDraft, current_user: AuthenticatedUser = CURRENT_USER, store: RecordStore = Depends(get_record_store)):
    if not (draft.location and draft.location.strip()) and draft.water_level is None and draft.ph is None and draft.conductivity is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No data to check. Please enter some data before checking integrity.")
    past = select_past_entries(store.list_records(), draft.location, settings.INTEGRITY_PAST_ENTRIES_LIMIT)
    return await intelligence_service.check_integrity(render_record_text(draft), [render_record_text(r) for r in past])

# --------------------------------------------------------------------------------------
# 5.4. Reports Router
# --------------------------------------------------------------------------------------
def _build_report(store: RecordStore, report_type: ReportType, start_date: Optional[date], end_date: Optional[date]) -> List[ReportRow]:
    return aggregate_report(store.list_records(), report_type, _date_range_from_query(start_date, end_date))

@router_reports.get("/reports", response_model=ReportResponse)
def generate_report(
    current_user: AuthenticatedUser = CURRENT_USER,
    store: RecordStore = Depends(get_record_store),
    report_type: ReportType = Query(ReportType.summary),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None)
):
    rows = _build_report(store, report_type, start_date, end_date)
    logger.info(f"Generated '{report_type.value}' report with {len(rows)} rows for {current_user.email or current_user.uid}.")
    return ReportResponse(
        report_type=report_type,
        selection_filters=dict(start_date=start_date, end_date=end_date),
        generated_on=datetime.now(timezone.utc),
        row_count=len(rows),
        rows=rows
    )

@router_reports.get("/reports/export")
def export_report(
    current_user: AuthenticatedUser = CURRENT_USER,
    store: RecordStore = Depends(get_record_store),
    report_type: ReportType = Query(ReportType.summary),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None)
):
    rows = _build_report(store, report_type, start_date, end_date)
    if not rows: raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No report data to export for the selected filters.")
    filename = f"report_{report_type.value}_{date.today().strftime('%Y%m%d')}.csv"
    return Response(content=report_rows_to_csv(rows), media_type="text/csv; charset=utf-8", headers={"Content-Disposition": f'attachment; filename="{filename}"'})

@router_reports.post("/reports/summary", response_model=SummaryResult)
async def summarize_generated_report(
    current_user: AuthenticatedUser = CURRENT_USER,
    store: RecordStore = Depends(get_record_store),
    report_type: ReportType = Query(ReportType.summary),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None)
):
    rows = _build_report(store, report_type, start_date, end_date)
    if not rows: raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No report data to summarize. Generate a report with data first.")
    return await intelligence_service.summarize_report(render_report_text(rows))

# --------------------------------------------------------------------------------------
# 5.5. Intelligence Router
# --------------------------------------------------------------------------------------
@router_intelligence.post("/intelligence/integrity-check", response_model=IntegrityVerdict)
async def integrity_check(request: IntegrityCheckRequest, current_user: AuthenticatedUser = CURRENT_USER):
    return await intelligence_service.check_integrity(request.new_data_entry, request.past_entries)

@router_intelligence.post("/intelligence/report-summary", response_model=SummaryResult)
async def report_summary(request: ReportSummaryRequest, current_user: AuthenticatedUser = CURRENT_USER):
    return await intelligence_service.summarize_report(request.report_text)

# ======================================================================================
# 6. MAIN APPLICATION (`main.py`)
# ======================================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"--- {settings.PROJECT_NAME} API Starting Up ({len(record_store)} records loaded) ---")
    yield
    logger.info(f"--- {settings.PROJECT_NAME} API Shutting Down ---")

app = FastAPI(title=settings.PROJECT_NAME, version=settings.PROJECT_VERSION, description=settings.DEPARTMENT_NAME, lifespan=lifespan, openapi_url="/api/v1/openapi.json")
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(CORSMiddleware, allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

app.include_router(router_users, prefix=API_PREFIX, tags=["1. Session"])
app.include_router(router_dashboard, prefix=API_PREFIX, tags=["2. Dashboard"])
app.include_router(router_records, prefix=API_PREFIX, tags=["3. Data Entry & Search"])
app.include_router(router_reports, prefix=API_PREFIX, tags=["4. Reports"])
app.include_router(router_intelligence, prefix=API_PREFIX, tags=["5. Intelligence"])

@app.get("/", tags=["Health Check"])
def read_root(): return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

# ======================================================================================
# END OF FILE
# ======================================================================================
