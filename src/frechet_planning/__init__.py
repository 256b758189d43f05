"""Plan arm trajectories whose end-effector path follows a reference path of 3D poses."""
