import argparse
import asyncio
import logging
import os

from dotenv import load_dotenv

from vehicle_playback import PlaybackSession, create_playback_map
from vehicle_playback.config import DEFAULT_INTERVAL_MS

load_dotenv()

logger = logging.getLogger("replay_route")

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay a recorded vehicle route")
    parser.add_argument("--source", default=os.getenv("VEHICLE_ROUTE_SOURCE"),
                        help="URL or path of the route JSON")
    parser.add_argument("--interval", type=int,
                        default=int(os.getenv("PLAYBACK_INTERVAL_MS", DEFAULT_INTERVAL_MS)),
                        help="Milliseconds between points (500-3000)")
    parser.add_argument("--output", default=".", help="Directory for the map snapshot")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)

async def replay(args: argparse.Namespace) -> int:
    loop = asyncio.get_running_loop()
    session = PlaybackSession(source=args.source, loop=loop, interval_ms=args.interval)

    if not session.load():
        logger.error(session.error)
        return 1
    if session.is_empty:
        logger.warning("No route data available")
        return 0

    controller = session.controller
    presenter = session.presenter
    finished = loop.create_future()

    def on_change(ctrl) -> None:
        logger.info(presenter.status_line())
        if not ctrl.is_playing and not finished.done():
            finished.set_result(ctrl.cursor)

    controller.subscribe(on_change)
    controller.play()
    if controller.is_playing and not controller.has_pending_tick:
        # Single-point routes have nothing to advance
        controller.pause()

    await finished

    output_path = create_playback_map(presenter, os.path.join(args.output, "playback_map.html"))
    print(f"Map saved to {output_path}")
    session.close()
    return 0

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    return asyncio.run(replay(args))

if __name__ == "__main__":
    raise SystemExit(main())
