from .plotting import plot_attitude, plot_linear_kinematics, plot_trajectory_3d
