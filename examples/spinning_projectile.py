"""
Example: spinning projectile under gravity.

A body is thrown along +x while spinning up about +z. Gravity and the
angular drive are supplied each tick through the pre-step callback, the
state is logged to CSV and plotted afterwards.
"""
import sys
from pathlib import Path

# Setup path for local development (not needed if installed via pip)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rigidbody import RigidBody, World
from rigidbody.dynamics.attitude import make_attitude
from rigidbody.utils.orientation import describe_attitude, orientation_from_axis_angle
from rigidbody.visualization.plotting import plot_attitude, plot_trajectory_3d

G = [0.0, 0.0, -9.81]  # m/s²


def run_example():
    ball = RigidBody(
        name="ball",
        pos=[0.0, 0.0, 2.0],
        vel=[5.0, 0.0, 8.0],
        ori=orientation_from_axis_angle([1, 0, 0], 0.0),
        tor=(0.0, [0.0, 0.0, 1.0]),
    )

    def drive(world, dt):
        # Spin up for the first second, then coast
        ball.acc[:] = G
        ball.wre = make_attitude(3.0 if world.t < 1.0 else 0.0, [0.0, 0.0, 1.0])

    world = World(simulation_name="spinning_projectile")
    world.add_body(ball)
    world.set_pre_step_callback(drive)
    world.set_termination_callback(lambda w: ball.pos[2] <= 0.0)
    world.run(duration=5.0, dt=0.001, log_interval=0.5)
    world.disable_logging()

    print(f"Landed at x={ball.pos[0]:.2f} m, t={world.t:.3f} s")
    print(f"Final orientation: {describe_attitude(ball.ori)}")

    csv_path = str(world.output_path / "logs" / "simulation.csv")
    plots = world.output_path / "plots"
    plot_trajectory_3d(csv_path, "ball", save_path=str(plots / "trajectory.png"), show=False)
    plot_attitude(csv_path, "ball", save_path=str(plots / "attitude.png"), show=False)
    print(f"Plots saved to {plots}")


if __name__ == "__main__":
    run_example()
