import logging

from flyby import FlyByClient
from flyby.errors import FlyByError
from flyby.logging import get_logger

# flyby loggers have their own handlers; basicConfig would duplicate them
logging.getLogger("flyby").setLevel(logging.INFO)
logger = get_logger(__name__)

LANDMARKS = {
    "Grand Canyon": (36.098592, -112.097796),
    "Niagara Falls": (43.078154, -79.075891),
    "Four Corners Monument": (36.998979, -109.045183),
}


def main():
    # Reads FLYBY_API_KEY from the environment or a .env file
    client = FlyByClient()

    for name, (lat, lon) in LANDMARKS.items():
        try:
            next_capture = client.imagery.predict_next_capture(lat, lon)
        except FlyByError as e:
            logger.error(f"{name}: {e}")
            continue
        print(f"{name}: next capture expected at {next_capture.isoformat()}")


if __name__ == "__main__":
    main()
