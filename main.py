import logging
import threading
from functools import lru_cache

from pydantic import BaseModel, Field

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from models import ValidationError, VehicleRequest
from settings import get_settings
from vehicleSearch import VehicleSearch

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI()

_search_lock = threading.Lock()

class VehicleQuery(BaseModel):
    length: float = Field(gt=0)
    quantity: int = Field(ge=0)

class LocationResult(BaseModel):
    location_id: str
    listing_ids: list[str]
    total_price_in_cents: int

def parse_vehicle_queries(vehicle_queries: list[VehicleQuery]) -> list[VehicleRequest]:
    parsed = []
    for query in vehicle_queries:
        parsed.append(VehicleRequest(length=query.length, quantity=query.quantity))
    return parsed

@lru_cache
def get_search() -> VehicleSearch:
    logger.info("Loading listings from %s", settings.listings_path)
    return VehicleSearch.from_file(settings.listings_path, vehicle_width=settings.vehicle_width)

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Rejected vehicle query: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.get("/")
async def root():
    return {"message": "Hello World"}

@app.post("/", response_model=list[LocationResult])
def get_items(vehicle_queries: list[VehicleQuery], search: VehicleSearch = Depends(get_search)) -> list[dict[str, str | list[str] | int]]:
    parsed_vehicle_queries = parse_vehicle_queries(vehicle_queries)
    vehicle_count = sum(query.quantity for query in parsed_vehicle_queries)
    if vehicle_count > settings.max_vehicles:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_vehicles} vehicles can be searched at once, got {vehicle_count}",
        )
    with _search_lock:
        results = search.find(parsed_vehicle_queries)
    return [result.to_dict() for result in results]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
