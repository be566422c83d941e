import structlog
from fastapi import APIRouter, HTTPException, status

from src.exceptions.weather import (
    InvalidCityError,
    RateLimitError,
    UpstreamTimeoutError,
    WeatherServiceError,
)
from src.models.weather.weather import ErrorResponse, WeatherRequest, WeatherResponse
from src.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


@router.post(
    "",
    summary="Get Weather For City",
    response_model=WeatherResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def get_weather(request: WeatherRequest):
    """
    Get the forecast for a city through the weather provider.

    The provider API key is attached server-side; the caller only sends the
    city and an optional country code.

    Args:
        request: City and optional country code.

    Returns:
        The provider payload, today's condition description and the city.

    Raises:
        HTTPException: 404 if the city cannot be resolved, 429 when the
            provider is rate limiting, 504 on upstream timeout and 502 for
            any other upstream failure.
    """
    logger.info(
        "API request: Get weather",
        city=request.city,
        country_code=request.country_code,
    )
    try:
        return await weather_service.get_weather(request)

    except InvalidCityError as e:
        logger.warning("City not found", city=request.city, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Location not found: {request.city}",
        )

    except RateLimitError as e:
        logger.warning("Provider rate limit hit", city=request.city)
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(e))

    except UpstreamTimeoutError as e:
        logger.error("Provider timed out", city=request.city)
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))

    except WeatherServiceError as e:
        logger.error("Failed to get weather", city=request.city, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to get weather for {request.city}: {str(e)}",
        )
