"""Headless mining session -- hold the beam on the asteroid and report the haul.

Demonstrates:
- Driving the engine without a display
- Seeded, repeatable sessions
- Counting spawns and absorptions through engine hooks

Run: python examples/headless.py --seconds 30 --seed 42
"""

import argparse
import logging

from asteroid_miner import Engine, Intent, MiningConfig, Overflow, Ship
from asteroid_miner.config import ASTEROID_CENTER
from asteroid_miner.world import MiningWorld


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seconds", type=float, default=30.0, help="simulated time")
    parser.add_argument("--fps", type=int, default=60, help="ticks per simulated second")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    parser.add_argument("--distance", type=float, default=150.0,
                        help="ship distance from the asteroid center")
    parser.add_argument("--max-debris", type=int, default=-1, help="live debris cap (-1 = none)")
    parser.add_argument("--drop-oldest", action="store_true",
                        help="drop oldest debris at the cap instead of refusing new ones")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = MiningConfig(
        max_debris=args.max_debris,
        overflow=Overflow.DROP_OLDEST if args.drop_oldest else Overflow.REFUSE,
    )
    ax, ay = ASTEROID_CENTER
    world = MiningWorld.from_config(config)
    world.ship = Ship(position=(ax - args.distance, ay), size=config.ship_size, speed=config.ship_speed)
    engine = Engine(config, seed=args.seed, world=world)

    spawned = 0

    def count_spawn(world, ctx, debris) -> None:
        nonlocal spawned
        spawned += 1

    engine.on_spawn(count_spawn)

    # Aim past the asteroid so its center sits inside the beam segment.
    intent = Intent(aim=(ax + 100.0, ay), beam_active=True)
    ticks = int(args.seconds * args.fps)
    view = engine.run(ticks, 1.0 / args.fps, intent)

    print(f"=== Mining session (seed={engine.seed}) ===")
    print(f"  ticks:     {view.tick_number}")
    print(f"  spawned:   {spawned}")
    print(f"  collected: {view.resources}")
    print(f"  in flight: {len(view.debris)}")
    print(f"  lost:      {spawned - view.resources - len(view.debris)}")


if __name__ == "__main__":
    main()
