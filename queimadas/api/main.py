"""
Queimadas - REST API

FastAPI application serving the biome list, fire detections filtered by
month and biome, camera viewports, and the interactive map.

Run with: uvicorn queimadas.api.main:app --reload
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from queimadas import __version__
from queimadas.biomes.bounds import DefaultView, resolve_bounds
from queimadas.biomes.correlator import (
    FilterPolicy,
    count_by_biome,
    extract_biome_keys,
    filter_by_selection,
)
from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.config import settings
from queimadas.core.constants import ALL_BIOMES_LABEL
from queimadas.core.logging import setup_logging
from queimadas.ingestion.geojson_client import GeoJSONClient
from queimadas.visualization.layers import outline_layers
from queimadas.visualization.map_generator import create_queimadas_map

logger = setup_logging()

# FastAPI app
app = FastAPI(
    title="Queimadas por Bioma",
    description="Wildfire detections over Brazilian biome outlines, by month and biome",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Pydantic Models
# ============================================================================

class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    timestamp: str
    modules: dict


class MonthsResponse(BaseModel):
    """Months with fire detection data."""
    months: List[str]
    default_month: str


class BiomesResponse(BaseModel):
    """Biomes found in the outline dataset."""
    count: int
    all_label: str
    biomes: List[str]


class QueimadasResponse(BaseModel):
    """Fire detections for a month, after the biome selection."""
    month: str
    biome: Optional[str]
    policy: FilterPolicy
    count: int
    by_biome: Dict[str, int] = Field(description="Feature count per biome key ('' = no biome)")
    collections: List[Dict[str, Any]]


class BoundsResponse(BaseModel):
    """Viewport for a biome selection."""
    biome: Optional[str]
    mode: str = Field(description="fit_bounds or set_view")
    bounds: Optional[List[List[float]]] = None
    padding: Optional[List[int]] = None
    center: Optional[List[float]] = None
    zoom: Optional[int] = None


# ============================================================================
# Helper Functions
# ============================================================================

# Shared client so the GeoJSON cache survives between requests
_geojson_client: Optional[GeoJSONClient] = None


def get_client() -> GeoJSONClient:
    """Get the shared GeoJSON client."""
    global _geojson_client
    if _geojson_client is None:
        _geojson_client = GeoJSONClient()
    return _geojson_client


def default_policy() -> FilterPolicy:
    """Filter policy from settings."""
    try:
        return FilterPolicy(settings.filter_policy.lower())
    except ValueError:
        logger.warning(f"Unknown filter policy '{settings.filter_policy}', using pass_through")
        return FilterPolicy.PASS_THROUGH


def check_month(client: GeoJSONClient, month: Optional[str]) -> str:
    """Resolve the month parameter, 404 if it has no dataset."""
    month = month or settings.default_month
    if month not in client.month_paths:
        raise HTTPException(
            status_code=404,
            detail=f"No fire data for month {month}. Available: {', '.join(client.months)}",
        )
    return month


# ============================================================================
# System Routes
# ============================================================================

@app.get("/", response_class=HTMLResponse)
async def root():
    """Welcome page."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Queimadas por Bioma</title>
        <style>
            body { font-family: Arial; max-width: 900px; margin: 50px auto; padding: 20px; background: #282c34; color: #eee; }
            h1 { color: #ff6b35; }
            h3 { color: #f7c873; margin-top: 30px; }
            a { color: #ff6b35; }
            code { background: #16213e; padding: 2px 8px; border-radius: 4px; color: #f7c873; }
            .endpoint { background: #16213e; padding: 10px; margin: 5px 0; border-radius: 4px; border-left: 3px solid #ff6b35; }
            .tag { display: inline-block; background: #ff6b35; color: white; padding: 2px 8px; border-radius: 3px; font-size: 12px; margin-right: 5px; }
        </style>
    </head>
    <body>
        <h1>🔥 Mapa de Queimadas por Bioma</h1>
        <p>Visualizando dados de focos de calor por período e bioma.</p>

        <h3>📚 Documentation</h3>
        <ul>
            <li><a href="/docs">Swagger UI - Interactive API Documentation</a></li>
            <li><a href="/redoc">ReDoc - Alternative Documentation</a></li>
            <li><a href="/health">Health Check</a></li>
        </ul>

        <h3>🔥 Data</h3>
        <div class="endpoint"><span class="tag">GET</span> <code>/api/v1/months</code> - Months with fire data</div>
        <div class="endpoint"><span class="tag">GET</span> <code>/api/v1/biomas</code> - Biomes in the outline dataset</div>
        <div class="endpoint"><span class="tag">GET</span> <code>/api/v1/queimadas</code> - Fire detections by month and biome</div>
        <div class="endpoint"><span class="tag">GET</span> <code>/api/v1/bounds</code> - Viewport for a biome</div>

        <h3>🗺️ Interactive Map</h3>
        <div class="endpoint"><span class="tag">GET</span> <code>/api/v1/map</code> - Fire map by month and biome</div>
    </body>
    </html>
    """


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status and module availability."""
    modules = {
        "geojson_client": True,
        "biomes": True,
        "visualization": True,
    }

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow().isoformat(),
        modules=modules,
    )


# ============================================================================
# Data Routes
# ============================================================================

@app.get("/api/v1/months", response_model=MonthsResponse, tags=["Data"])
async def get_months(client: GeoJSONClient = Depends(get_client)):
    """List the months with fire detection data."""
    return MonthsResponse(months=client.months, default_month=settings.default_month)


@app.get("/api/v1/biomas", response_model=BiomesResponse, tags=["Data"])
async def get_biomes(client: GeoJSONClient = Depends(get_client)):
    """
    List the biomes of the outline dataset.

    Keys are normalized (uppercase, no accents) and sorted. The country
    boundary feature is not a biome and is left out.
    """
    try:
        outline = client.load_outline()
        biomes = extract_biome_keys(
            outline,
            country_field=settings.country_field,
            country_sentinel=settings.country_sentinel,
            label_field=settings.biome_label_field,
        )
        return BiomesResponse(count=len(biomes), all_label=ALL_BIOMES_LABEL, biomes=biomes)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/queimadas", response_model=QueimadasResponse, tags=["Data"])
async def get_queimadas(
    month: Optional[str] = Query(default=None, description="Month key (YYYY-MM)"),
    bioma: Optional[str] = Query(default=None, description="Biome name or key, empty for all"),
    policy: Optional[FilterPolicy] = Query(default=None, description="pass_through or strict"),
    client: GeoJSONClient = Depends(get_client),
):
    """
    Get the fire detections of a month.

    - **month**: Month key, defaults to the configured default month
    - **bioma**: Selected biome; only hides fires under the strict policy
    - **policy**: Filter policy, defaults to the configured one
    """
    month = check_month(client, month)
    selection = normalize_biome_name(bioma)
    policy = policy or default_policy()

    try:
        fires = client.load_month(month)
        visible = filter_by_selection(fires, selection, policy, settings.fire_biome_field)
        counts = count_by_biome(visible, settings.fire_biome_field)

        return QueimadasResponse(
            month=month,
            biome=selection,
            policy=policy,
            count=sum(counts.values()),
            by_biome={key or "": value for key, value in counts.items()},
            collections=visible,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/bounds", response_model=BoundsResponse, tags=["Data"])
async def get_bounds(
    bioma: Optional[str] = Query(default=None, description="Biome name or key, empty for all"),
    client: GeoJSONClient = Depends(get_client),
):
    """
    Get the map viewport for a biome selection.

    Unknown biomes and a missing outline fall back to the default view.
    """
    selection = normalize_biome_name(bioma)

    try:
        layers = outline_layers(
            client.load_outline(),
            label_field=settings.biome_label_field,
            country_field=settings.country_field,
            country_sentinel=settings.country_sentinel,
            include_country=True,
        )
        view = resolve_bounds(
            selection,
            layers,
            default_view=DefaultView.from_settings(settings),
            padding=settings.fit_padding_px,
        )
        return BoundsResponse(biome=selection, **view.to_dict())
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# ============================================================================
# Map Routes
# ============================================================================

@app.get("/api/v1/map", response_class=HTMLResponse, tags=["Map"])
async def get_map(
    month: Optional[str] = Query(default=None, description="Month key (YYYY-MM)"),
    bioma: Optional[str] = Query(default=None, description="Biome name or key, empty for all"),
    policy: Optional[FilterPolicy] = Query(default=None, description="pass_through or strict"),
    client: GeoJSONClient = Depends(get_client),
):
    """
    Generate the interactive fire map.

    Returns an HTML page with a Leaflet map of the biome outlines and the
    month's fire detections, zoomed to the selected biome.
    """
    month = check_month(client, month)
    policy = policy or default_policy()

    try:
        fire_map = create_queimadas_map(
            outline=client.load_outline(),
            fire_collections=client.load_month(month),
            selection=bioma,
            policy=policy,
            title=f"Mapa de Queimadas por Bioma ({month})",
            default_view=DefaultView.from_settings(settings),
            padding=settings.fit_padding_px,
            label_field=settings.biome_label_field,
            fire_label_field=settings.fire_biome_field,
            country_field=settings.country_field,
            country_sentinel=settings.country_sentinel,
        )

        return fire_map._repr_html_()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
