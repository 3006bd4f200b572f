"""CLI main entry point."""

import argparse
import logging
import sys
from gravity_sim.io.parameters import ConfigError
from gravity_sim.physics.forces import UPDATE_SCHEMES
from gravity_sim.physics.simulation import Simulation
from gravity_sim.render.recording import RecordingRenderer
from gravity_sim.scheduling.manual import ManualScheduler
from gravity_sim.scheduling.realtime import RealTimeScheduler
from gravity_sim.utils.config import default_config, load_config, save_config


def build_renderer(args, config):
    """Create the renderer requested on the command line."""
    if args.render or config.render:
        from gravity_sim.render.renderer_2d import Renderer2D
        return Renderer2D(xlim=config.xlim, ylim=config.ylim, show=True)
    return RecordingRenderer(max_frames=2)


def print_header(sim):
    snapshots = sim.snapshots()
    columns = " ".join(f"{body.name + ' x':<12} {body.name + ' y':<12}" for body in snapshots)
    print(f"{'Tick':<8} {columns}")
    print("-" * (8 + 26 * len(snapshots)))


def print_row(sim):
    positions = sim.get_state()[0]
    columns = " ".join(f"{x:<12.4f} {y:<12.4f}" for x, y in positions)
    print(f"{sim.tick_count:<8} {columns}")


def run_simulation(args) -> int:
    """Run a simulation until collision or the tick limit.

    Returns:
        Process exit code
    """
    try:
        config = load_config(args.config) if args.config else default_config()
    except (OSError, ConfigError) as e:
        print(f"Could not load configuration: {e}")
        return 1

    if args.scheme is not None:
        config.scheme = args.scheme
    max_ticks = args.ticks if args.ticks is not None else config.max_ticks

    scheduler = RealTimeScheduler() if args.realtime else ManualScheduler()
    renderer = build_renderer(args, config)
    sim = Simulation.from_config(config, renderer=renderer, scheduler=scheduler)

    collided = []
    sim.on_collision(lambda s: collided.append(s.tick_count))
    if args.print_every > 0:
        sim.on_tick(lambda s: print_row(s) if s.tick_count % args.print_every == 0 else None)

    print(f"Running simulation with {len(sim.snapshots())} bodies")
    print(f"Scheme: {sim.scheme}, tick rate: {sim.tick_rate:g}/s, max ticks: {max_ticks}")
    if args.print_every > 0:
        print_header(sim)

    sim.start()
    if isinstance(scheduler, RealTimeScheduler):
        scheduler.run(max_ticks=max_ticks)
    else:
        scheduler.advance(max_ticks)
    sim.stop()

    if args.print_every > 0 and sim.tick_count % args.print_every != 0:
        print_row(sim)

    if collided:
        print(f"Collision detected! Simulation stopped after {collided[0]} ticks.")
    else:
        print(f"No collision after {sim.tick_count} ticks.")

    renderer.close()
    return 0


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravity Simulator - circles attracting until they collide")

    parser.add_argument('--config', type=str, default=None,
                       help='Configuration file (.json, .yaml or .yml). Default: built-in three bodies')
    parser.add_argument('--ticks', type=int, default=None,
                       help='Maximum number of ticks (default: from config)')
    parser.add_argument('--scheme', type=str, default=None,
                       choices=sorted(UPDATE_SCHEMES.keys()),
                       help='Update scheme: sequential (in-place, order dependent) or snapshot')
    parser.add_argument('--realtime', action='store_true',
                       help='Tick at the configured rate on the wall clock instead of as fast as possible')
    parser.add_argument('--render', action='store_true',
                       help='Show a matplotlib window')
    parser.add_argument('--print-every', type=int, default=60,
                       help='Print positions every N ticks (0 disables)')
    parser.add_argument('--write-config', type=str, default=None,
                       help='Write the default configuration to this path and exit')
    parser.add_argument('--log-level', type=str, default='WARNING',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.write_config:
        save_config(default_config(), args.write_config)
        print(f"Default configuration written to {args.write_config}")
        return 0

    return run_simulation(args)


if __name__ == '__main__':
    sys.exit(main())
