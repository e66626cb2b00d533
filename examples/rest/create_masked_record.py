import logging
import time

from src.rest.client import TrafficPortalApiClient
from src.rest.config import TrafficPortalSettings
from src.rest.exceptions import (
    TrafficPortalApiError,
    TrafficPortalAuthenticationError,
    TrafficPortalNetworkError,
    TrafficPortalValidationError,
)
from src.rest.models import CreateMapRequest


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Reads TP_API_ENDPOINT, TP_API_KEY, TP_TIMEOUT and TP_TEST_UID
    settings = TrafficPortalSettings()
    client = TrafficPortalApiClient.from_settings(settings)

    request = CreateMapRequest(
        uid=settings.test_uid or 125,
        tp_key=f"example{int(time.time())}",
        domain="dev.trfc.link",
        destination="https://example.com",
        status="active",
        type="redirect",
        is_set=0,
        tags="example,demo",
        notes="Created via Python client",
        settings="{}",
        cache_content=0,
    )

    print("Creating masked record...")
    try:
        response = client.create_masked_record(request)
        if response.success:
            print("Success!")
            print(f"Message: {response.message}")
            print(f"Record ID: {response.mid}")
            print(f"TP Key: {response.tp_key}")
            print(f"Domain: {response.domain}")
            print(f"Destination: {response.destination}")

            print("\nFull response data:")
            for key, value in (response.source or {}).items():
                print(f"  {key}: {value}")
        else:
            print(f"Record not created: {response.message}")

    except TrafficPortalAuthenticationError as e:
        print(f"Authentication failed: {e}")
        print("Please check your UID and API key.")
    except TrafficPortalValidationError as e:
        print(f"Validation error: {e}")
        print("The key might already exist or the data is invalid.")
    except TrafficPortalNetworkError as e:
        print(f"Network error: {e}")
        print("Please check your internet connection and API endpoint.")
    except TrafficPortalApiError as e:
        print(f"API error: {e}")
        print(f"HTTP Code: {e.code}")


if __name__ == "__main__":
    main()
