"""Basic example of using the gravity simulator."""

from gravity_sim import Simulation, Config
from gravity_sim.scheduling import ManualScheduler


def main():
    """Run the default three circles until two of them collide."""
    config = Config()
    scheduler = ManualScheduler()
    sim = Simulation.from_config(config, scheduler=scheduler)

    @sim.on_tick
    def report(s):
        if s.tick_count % 100 == 0:
            positions = s.get_state()[0]
            print(f"Tick {s.tick_count}: " + ", ".join(f"({x:.3f}, {y:.3f})" for x, y in positions))

    @sim.on_collision
    def collided(s):
        print(f"Collision detected after {s.tick_count} ticks")

    print("Running simulation...")
    sim.start()
    scheduler.advance(config.max_ticks)
    sim.stop()

    # Back to the configured starting positions
    sim.reset()
    print(f"Reset: running={sim.running}")


if __name__ == "__main__":
    main()
