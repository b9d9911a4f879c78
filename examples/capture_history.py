from flyby import FlyByClient
from flyby.imagery import mean_capture_interval, predict_next_capture


def main():
    client = FlyByClient()

    # Niagara Falls
    captures = client.imagery.get_captures(latitude=43.078154, longitude=-79.075891)
    for capture in sorted(captures, key=lambda c: c.date):
        print(capture.date.isoformat(), capture.id)

    print(f"Average time between captures: {mean_capture_interval(captures)}")
    print(f"Next capture expected at: {predict_next_capture(captures).isoformat()}")


if __name__ == "__main__":
    main()
