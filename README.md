# hapticteleop

Building blocks for teleoperating a robot arm or a cable-driven continuum
instrument with a desktop haptic stylus. The package holds the
computations that sit between a stylus and a robot, written as plain
functions and small classes so they can be driven from any event loop and
tested on their own.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## What is inside

### `hapticteleop.continuum`

Inverse kinematics of a single-segment continuum section driven by three
ropes spaced 120° apart.

- `bend_angles(x, y, z)` returns `(beta, phi)`: the bending angle
  `2 * atan2(hypot(x, y), z)` and the rotation angle `atan2(y, x)` moved
  into `[0, 2π)`.
- `rope_length_changes(length, radius, x, y, z)` returns the length change
  of each of the three ropes. A point on the section axis (bending angle
  zero) raises `ValueError`.
- `append_row(path, values)` appends one line of space-separated values
  to a text file.
- `circle_points(radius, center, num_points)` yields evenly spaced points
  on a horizontal circle around `center`.
- `write_circle_rope_lengths(path="delta_l.txt", radius=10.0,
  center=(0.0, 0.0, 5.0), num_points=100)` appends the rope length changes
  for each circle point, using a section length of 10, a rope offset of 3
  and a tip height of 5.
- `plot_circle(radius, center, track_path="track.txt",
  angles_path="beta_phi.txt")` samples 100 points of a circle at height 1
  and appends each point and its bending angles to the two files.
- `PoseRecorder(track_path, angles_path)` records incoming stylus
  positions: `on_pose(x, y, z)` appends the position and its angles to
  the two files and returns the angles.

### `hapticteleop.geometry`

A frozen `Quaternion` dataclass (`x`, `y`, `z`, `w`, with `norm()` and
`normalized()`) and conversions between quaternions, 3×3 rotation
matrices and roll/pitch/yaw angles: `quaternion_to_matrix`,
`matrix_to_quaternion` (unit quaternion with `w >= 0`), `matrix_to_rpy`,
`rpy_to_matrix` and `matmul3`. Angles follow
`R = Rz(yaw) · Ry(pitch) · Rx(roll)`.

### `hapticteleop.pose_mapping`

- `map_pose(position, orientation)` maps a stylus pose to a follower
  target `(x, y, z, roll, pitch, yaw)`: the y and z axes are swapped and
  pitch and yaw are mirrored.
- `round_to_three_digits(value)` rounds to three decimals, halves away
  from zero.
- `JointHold(joint_count=6)` keeps the last valid inverse-kinematics
  solution: `update(solution)` stores a solution, and `update(None)` for a
  failed solve returns the positions held from before.
- `JointPositionBuffer(joint_count=6)` is a thread-safe store of the
  latest joint reading: `on_joint_state(positions)` stores it and sets
  `new_data`; `snapshot()` returns it and clears `new_data`.

### `hapticteleop.haptic_state`

- `units_ratio(units)` returns the divisor for `"mm"`, `"cm"`, `"dm"` or
  `"m"`; any other unit logs a warning and gives millimetres.
- `joint_state_positions(thetas)` maps the seven device angles to the
  named joints `waist`, `shoulder`, `elbow`, `yaw`, `pitch` and `roll`.
- `VelocityEstimator` estimates velocity by a second-order backward
  difference followed by a 20 Hz low-pass filter; `update(position)`
  feeds one sample and returns the filtered velocity.
- `DeviceSample` is one frame read from a device: its button bits, 4×4
  transform, joint and gimbal angles. It derives `button_states`,
  `mapped_position`, `orientation` and `thetas`.
- `HapticState` holds everything known about the stylus between frames:
  position, velocity, orientation, angles, force, lock position, buttons
  and the lock and gripper flags.

### `hapticteleop.otg`

The data types of a jerk-limited online trajectory generator: the
profile enumerations `Step1Profile`, `Step2Profile` and
`VelocityProfile`, the dataclasses `MotionState` and `MotionProperty`,
and `JointTrajectoryInput(dof, control_cycle)` and
`JointTrajectoryOutput(dof)` with one list entry per joint. Numeric
helpers: `rml_sqrt`, `sign`, `fsign`, `pow2`, `is_epsilon_equal` and
`is_input_epsilon_equal`, together with the generator's tolerance
constants.

## Example

```python
from hapticteleop.continuum import bend_angles, rope_length_changes

beta, phi = bend_angles(1.0, 1.0, 5.0)
changes = rope_length_changes(10.0, 3.0, 1.0, 1.0, 5.0)
```

```python
from hapticteleop.pose_mapping import JointHold, map_pose

target = map_pose((0.1, 0.2, 0.3), (0.0, 0.0, 0.0, 1.0))
hold = JointHold()
hold.update([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
hold.update(None)  # a failed solve keeps the previous positions
```

## Command line

```
hapticteleop-circle [--radius R] [--center X Y Z] [--track FILE] [--angles FILE]
```

samples 100 points of a circle (by default radius 5 centred at
(0, 0, 1)), appending each sampled position to `track.txt` and its
bending and rotation angles to `beta_phi.txt` in the current directory,
or to the files given.

## What the package does not do

It talks to no hardware and to no messaging system: there is no device
driver, no node that publishes stylus state, poses, button events or
joint states, and no force-feedback controller that commands the stylus.
It has no inverse-kinematics solver for the arm; `JointHold` only keeps
the solutions some other solver produces. `hapticteleop.otg` holds the
types and helpers of a trajectory generator, not the planning algorithm
itself.