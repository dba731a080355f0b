# settleplan

settleplan is an interactive, turn-based simulation of development plans for settlements. You describe settlements and facility types in a configuration file and attach plans to settlements. Then you advance time step by step. On each step, a plan starts building facilities chosen by its selection policy and adds to its life-quality, economy and environment scores as buildings are finished.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Running

```
settleplan config_file.txt
```

The program needs exactly one configuration path. If you give none, or more than one, it prints `usage: simulation <config_path>` and exits. If the file cannot be opened, it reports this on standard error and starts with an empty simulation.

Commands are read from standard input, one per line. The program stops after `close` or when the input ends.

## Configuration file

The file is read line by line, and each line is split on whitespace. Empty lines are skipped, and so are lines whose first token is `#`. Any other line that is not recognised produces a warning on standard error.

```
# name      type (0 village, 1 city, 2 metropolis)
settlement  KfarSPL 0
# name      category (0 life quality, 1 economy, 2 environment)  price  life  economy  environment
facility    Market  1  3  0  2  1
facility    Park    2  2  1  0  3
# settlement  policy (nve, bal, eco, env)
plan        KfarSPL nve
```

Settlement and facility names must be unique. A repeated name is reported and ignored. Plans are numbered from 0 in the order they are created.

The four selection policies are:

- `nve` (`NaiveSelection`) cycles through the facility options in order.
- `bal` (`BalancedSelection`) picks the facility that keeps the three running scores closest together.
- `eco` (`EconomySelection`) cycles through the economy facilities only.
- `env` (`SustainabilitySelection`) cycles through the environment facilities only.

The settlement type limits how many facilities a plan can have under construction at once:

| Settlement type | Limit |
| --- | --- |
| village | 1 |
| city | 2 |
| metropolis | 3 |

A facility's price is the number of steps it takes to build. Once a facility is finished, its scores are added to the plan's scores.

## Commands

| Command | Effect |
| --- | --- |
| `step <n>` | Advance every plan by `n` steps. `n` must be positive. |
| `plan <settlement> <policy>` | Add a plan for an existing settlement. |
| `settlement <name> <type>` | Add a settlement. |
| `facility <name> <category> <price> <life> <economy> <environment>` | Add a facility option. The price must be positive and the scores must not be negative. |
| `planStatus <id>` | Print a plan's full status, including its operational facilities and the ones under construction. |
| `changePolicy <id> <policy>` | Switch a plan's selection policy. The new policy must differ from the current one. |
| `log` | Print the actions performed so far and the status of each. |
| `backup` | Keep a copy of the whole simulation in memory. |
| `restore` | Swap the simulation with the saved copy. |
| `close` | Print every plan's results and stop. |

A command that is malformed or unknown is reported on standard error, and the loop carries on.

## Library use

You can also drive the simulation from code:

```python
from settleplan.simulation import Simulation

sim = Simulation()
sim.load_config([
    "settlement KfarSPL 0",
    "facility Market 1 3 0 2 1",
    "plan KfarSPL nve",
])
sim.execute("step 3")
print(sim.get_plan(0))
```

`Simulation.execute` runs one command line and returns the action it performed. It raises `SimulationError` for malformed or unknown commands. `Simulation.start` accepts any iterable of lines in place of standard input.

The building blocks live in these modules:

- `settleplan.settlement`
- `settleplan.facility`
- `settleplan.selection_policy`
- `settleplan.plan`
- `settleplan.actions`

## Limitations

- Backups are held only in memory, for the length of one run.
- Nothing is saved to disk.
- The configuration file is only read, never written back.