"""FastAPI web app exposing the MCS sweep and link budget calculators."""

from contextlib import asynccontextmanager
from typing import Dict, List, Literal

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from rflink_sim.analysis import LinkBudgetParams, compute_link_budget, estimate_throughput, generate_report
from rflink_sim.config import get_settings
from rflink_sim.core import LinkConfiguration, sweep_mcs
from rflink_sim.errors import EngineError, UnknownProfileError
from rflink_sim.log import get_logger, setup_logging
from rflink_sim.profiles import get_profile, list_profiles, power_limit_options

settings = get_settings()
logger = get_logger("app")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(settings.log_level)
    yield


app = FastAPI(title="RF Link Planner", lifespan=lifespan)


# ============================================================================
# Data models
# ============================================================================

class SweepRequest(BaseModel):
    profile: str = Field(default_factory=lambda: get_settings().default_profile)
    frequency_mhz: float = 2450.0
    bandwidth_mhz: float = 20.0
    antennas: int = 2
    streams: int = 2
    antenna_gain_dbi: float = 6.0
    fade_margin_db: float = 10.0
    power_limit_dbm: float = 33.0
    frame_aggregation: int = Field(default_factory=lambda: get_settings().default_frame_aggregation)
    near_ground: bool = False
    fresnel_clearance_pct: float = Field(default_factory=lambda: get_settings().default_fresnel_clearance_pct)
    telemetry_kbps: float = 50.0
    video_mbps: float = 3.0
    height_agl: float = 400.0
    height_unit: Literal["feet", "meters"] = "feet"
    udp_payload_bytes: int = Field(default_factory=lambda: get_settings().default_udp_payload_bytes)
    mcs_family: Literal["diversity", "multiplexing"] = "diversity"

    def to_config(self) -> LinkConfiguration:
        fields = self.model_dump(exclude={"profile"})
        return LinkConfiguration(**fields)


class LinkBudgetRequest(BaseModel):
    distance_km: float
    frequency_ghz: float
    bandwidth_mhz: float = 20.0
    tx_power_dbm: float = 20.0
    tx_antenna_gain_dbi: float = 6.0
    rx_antenna_gain_dbi: float = 6.0
    tx_cable_loss_db: float = 0.0
    rx_cable_loss_db: float = 0.0
    noise_figure_db: float = 4.0
    rain_rate_mm_hr: float = 0.0
    fog_density_g_m3: float = 0.0
    vegetation_depth_m: float = 0.0
    walls_count: int = 0
    additional_loss_db: float = 0.0
    temperature_c: float = 25.0
    tx_height_m: float = 3.0
    rx_height_m: float = 3.0
    obstacle_height_m: float = 0.0
    mimo_streams: int = 1


# ============================================================================
# Calculation wrappers
# ============================================================================

def run_sweep(req: SweepRequest) -> Dict:
    profile = get_profile(req.profile)
    pair = sweep_mcs(profile, req.to_config())
    result = pair.to_dict()
    result["profile"] = {"key": profile.key, "name": profile.name}
    result["total_throughput_mbps"] = pair.diversity.total_throughput_demand_mbps
    return result


def run_link_budget(req: LinkBudgetRequest) -> Dict:
    params = LinkBudgetParams(**req.model_dump())
    budget = compute_link_budget(params)
    return {
        "path_loss_db": budget.path_loss_db,
        "environment": {
            "rain_db": budget.environment.rain_db,
            "fog_db": budget.environment.fog_db,
            "vegetation_db": budget.environment.vegetation_db,
            "building_db": budget.environment.building_db,
            "additional_db": budget.environment.additional_db,
        },
        "environment_loss_db": budget.environment_loss_db,
        "fading_margin_db": budget.fading_margin_db,
        "eirp_dbm": budget.eirp_dbm,
        "received_signal_power_dbm": budget.received_signal_power_dbm,
        "noise_floor_dbm": budget.noise_floor_dbm,
        "snr_db": budget.snr_db,
        "recommended_mcs": budget.recommended_mcs,
        "expected_throughput_mbps": estimate_throughput(budget.recommended_mcs, req.bandwidth_mhz, 2),
        "sensitivity_dbm": budget.sensitivity_dbm,
        "link_margin_db": budget.link_margin_db,
        "link_status": budget.link_status.value,
        "required_antenna_height_m": budget.required_antenna_height_m,
        "report": generate_report(budget, req.distance_km, req.frequency_ghz, req.bandwidth_mhz),
    }


def _error_response(exc: EngineError) -> JSONResponse:
    status = 404 if isinstance(exc, UnknownProfileError) else 422
    logger.warning("calculation rejected: %s", exc)
    return JSONResponse(status_code=status, content={"ok": False, "error": str(exc), "kind": type(exc).__name__})


# ============================================================================
# API endpoints
# ============================================================================

@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/api/profiles")
async def profiles() -> List[Dict]:
    return [
        {
            "key": p.key,
            "name": p.name,
            "max_tx_power_dbm": p.max_tx_power_dbm,
            "frequencies_mhz": list(p.supported_frequencies_mhz),
        }
        for p in list_profiles()
    ]


@app.get("/api/profiles/{key}/power-limits")
async def power_limits(key: str):
    try:
        return {"ok": True, "result": power_limit_options(key)}
    except EngineError as e:
        return _error_response(e)


@app.post("/api/sweep")
async def sweep(req: SweepRequest):
    try:
        return {"ok": True, "result": run_sweep(req)}
    except EngineError as e:
        return _error_response(e)


@app.post("/api/link-budget")
async def link_budget(req: LinkBudgetRequest):
    try:
        return {"ok": True, "result": run_link_budget(req)}
    except EngineError as e:
        return _error_response(e)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
