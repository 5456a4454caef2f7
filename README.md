# hmnguard

A small library of guardrails for agents that act for people. The rules are
simple and inspectable. They aim to keep human agency intact. Everything is
in-process Python, and the library has no dependencies outside the standard
library.

## Modules

### `hmnguard.ethics`

- `IntrospectionHook.pre_decision(intent)` starts a `DecisionTrace` stamped
  with the current UTC time.
- `IntrospectionHook.post_decision(trace, outcome)` appends a
  `ReasoningStep` with the description `"Final outcome :" + outcome`.
- `DecisionTrace.explainable()` is true when the trace has both an intent and
  at least one step.
- `BlockPolicy(manipulation=None, authority_simulation=None, value_drift=None)`
  takes optional detector callables. Each one receives a trace and returns a
  bool. A detector you leave out never fires. `evaluate(trace)` checks the
  rules in this order and returns the first match as a `BlockResult`:
  1. not explainable gives `REQUIRE_REFLECTION`
  2. manipulation gives `HARD_BLOCK`
  3. authority simulation gives `HARD_BLOCK`
  4. value drift gives `SLOW_DOWN`
  5. otherwise the result is `BlockLevel.NONE` with an empty reason.
- `EthicalGate(policy=None)` evaluates traces with its policy, or with a
  default `BlockPolicy()`.

### `hmnguard.security`

- `MisuseDetector.analyze(content)` returns a `MisuseSignal`. The phrases it
  looks for are:
  - `"you must"`, giving `AUTHORITY_SIMULATION`
  - `"only for HMN understands you"`, giving `DEPENDENCY`
  - `"convince others"`, giving `MANIPULATION`

  It checks them in that order. If none is found, the signal is
  `MisuseType.NONE` with an empty reason.
- `EncryptionPolicy.encrypt` and `decrypt` take a payload and an
  `EncryptionScope`. Both return the payload unchanged as `bytes`.

### `hmnguard.inheritance`

- `AgentConstraint.allow_suggestion(content)` is false when the content
  contains `"you should"` or `"must"`.
- `AgentAdapter.sanitize_output(raw)` returns `raw`, or the notice
  `"[BLocked] : disrective language detected"` when the text is directive.
- `MeaningFilter.preserve_human_meaning(trace)` is true when an `IBCSTrace` is
  explainable and has a non-empty thought path.
- `DecisionContract` holds a decision's intent and context, and whether a
  person must acknowledge it.
- `LifeCyclePhase` names the phases before and after a decision and an action.

### `hmnguard.distributed`

- `SelfHeal.should_pause(state)` is true when a `GroupState` has a pressure
  level above 0.6 and a manipulation risk.
- `fair_use(acc)` is true only when the `ResourceAccounting` has
  `cpu_usage < 0.0` and `storage_usage < 0.9`.
- `Node.start()` and `Node.stop()` set the node's `running` flag.
  `start()` returns `True`.
- `EdgeSync.sync_allowed()` always returns `False`, because automatic sync
  is off.
- `AdaptiveSignal` lists the group conditions: stable, overload, conflict and
  meaning dilution.

### `hmnguard.circles`

- `Circle.request_join(peer_id)` records the peer with a default
  `TrustScore` of 0.5. It always returns `False`, because admission is never
  granted automatically.
- `Circle.allow_message(peer_id)` is true only for a known peer whose trust is
  at least 0.6. `leave(peer_id)` forgets the peer.
- `CircleAgent` counts the messages it observes. `should_pause()` becomes true
  after more than 30 messages.
- `get_current_context()` returns a fixed `EarthContext` with
  `climate_stress=0.6` and `social_tension=0.7`.

### `hmnguard.journaling`

- `JournalEntry` holds a note's content, its timestamp and its emotional
  weight.
- `IntrospectionEntry` holds the context, the action, the reasoning, the values
  involved, the detected conflicts, and the tension and pressure scores.
- `IntrospectionEngine.requires_human_attention()` is true once three or more
  submitted entries have a moral tension or external pressure above 0.7.
- `detect_conflicts(entry)` checks each pair of values in order. For every
  pair that matches `("efficiency", "dignity")` or `("Safety", "Autonomy")` it
  adds a `ConflictTag` and 0.1 tension. The tension is capped at 1.0.
- `BiasTrace.record(bias_type)` counts one occurrence.
  `bias_intensity(bias_type)` returns that count divided by 100.
- `MoralWeight.effective()` returns the base weight multiplied by both
  modifiers.
- `PressureSignal` holds a `PressureType`, an intensity and a source.

## Installation

```
pip install .
```

## Example

```python
from hmnguard.ethics import BlockLevel, EthicalGate, IntrospectionHook

hook = IntrospectionHook()
trace = hook.pre_decision("suggest a break")
hook.post_decision(trace, "break suggested")

result = EthicalGate().inspect(trace)
assert result.level is BlockLevel.NONE
```

```python
from hmnguard.security import MisuseDetector, MisuseType

signal = MisuseDetector.analyze("you must do this now")
assert signal.type is MisuseType.AUTHORITY_SIMULATION
```

## What it does not do

- There is no real encryption. `EncryptionPolicy` passes data through
  unchanged.
- There is no networking or peer-to-peer transport. `Circle` and `Node` only
  keep state in memory.
- There is no persistent storage for journals or local state.
- There is no command-line tool. The package is a library only.

## Running the tests

```
pip install ".[test]"
pytest
```