# osdemos

Small, runnable demonstrations of classic operating-system ideas. Each
demo is a Python function you can call and a command you can run from a
shell. Together they cover processes, lottery scheduling, address spaces,
threads, races, locks, condition variables and semaphores. The package
uses only the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules and commands

| Module | What it shows | Command |
| --- | --- | --- |
| `osdemos.common` | `get_time()` and the busy-wait `spin(howlong)` | — |
| `osdemos.intro` | printing forever, a durable write, a value incremented once a second, a racy shared counter, where objects live | `osdemos-cpu`, `osdemos-io`, `osdemos-mem`, `osdemos-threads`, `osdemos-va` |
| `osdemos.process` | `fork_hello`, `fork_wait`, `fork_exec`, `fork_redirect` | `osdemos-process` |
| `osdemos.lottery` | lottery scheduling with the `Lottery` class | `osdemos-lottery` |
| `osdemos.udp` | a UDP client and a server that answers each message | `osdemos-udp-client`, `osdemos-udp-server` |
| `osdemos.zemaphore` | `Zemaphore`, a semaphore built from a lock and a condition variable | `osdemos-zemaphore` |
| `osdemos.threadsapi` | starting threads, passing arguments, getting results back, an unlocked shared counter | `osdemos-t0`, `osdemos-t1` |
| `osdemos.bugs` | atomicity violation, deadlock and ordering violation, with fixes; `PrThread` | `osdemos-bugs` |
| `osdemos.cas` | compare-and-swap on an `AtomicInt` | `osdemos-cas` |
| `osdemos.cvjoin` | joining a thread with condition variables, right and wrong; `Synchronizer` | `osdemos-cvjoin` |
| `osdemos.pc` | producer/consumer over a `BoundedBuffer` | `osdemos-pc` |
| `osdemos.sema` | semaphores as a lock, as a join and as a throttle | `osdemos-sema` |
| `osdemos.rwlock` | a reader/writer lock, `RWLock` | `osdemos-rwlock` |
| `osdemos.dining` | the dining philosophers, with and without deadlock | `osdemos-dining` |

## Command arguments

```
osdemos-cpu <string>                 # prints the string until interrupted
osdemos-mem <value>                  # increments the value once a second until interrupted
osdemos-threads <loops>
osdemos-io                           # writes "hello world" to /tmp/file
osdemos-va
osdemos-process <p1|p2|p3|p4>
osdemos-lottery <seed> <loops>
osdemos-udp-server                   # listens on UDP port 10000, forever
osdemos-udp-client                   # sends from port 20000 to localhost:10000
osdemos-zemaphore
osdemos-t0
osdemos-t1 <loopcount>
osdemos-bugs <atomicity|atomicity_fixed|deadlock|ordering|ordering_fixed>
osdemos-cas
osdemos-cvjoin <join|join_modular|join_no_lock|join_no_state_var|join_spin>
osdemos-pc <buffersize> <loops> <consumers> [cv|single_cv|semaphore]
osdemos-sema binary | join | throttle <num_threads> <sem_value>
osdemos-rwlock <readloops> <writeloops>
osdemos-dining <num_loops> [--deadlock] [--print]
```

Commands that take arguments print a usage line and exit with status 1
when given the wrong ones.

`osdemos-process p3` and `p4` start the `wc` program on `p3.c` and
`p4.c` in the current directory; `p4` writes the result to
`./p4.output`.

## A few examples

Run a seeded lottery over jobs holding 50, 100 and 25 tickets:

```
osdemos-lottery 1 5
```

Use the scheduler directly:

```python
import random
from osdemos.lottery import Lottery

lottery = Lottery((50, 100, 25))
print(lottery.format_list())          # List: [25] [100] [50]
for winner, tickets in lottery.run(random.Random(1), 3):
    print(winner, tickets)
```

Watch two threads race on a shared counter:

```python
from osdemos.intro import count_concurrently

print(count_concurrently(100_000))
```

Collect what each consumer received:

```python
from osdemos.pc import produce_consume

print(produce_consume(buffer_size=2, loops=5, consumers=1, variant="semaphore"))
```

## Demos that can hang

Some demos exist to show a bug. Called from Python, `deadlock_demo`,
`join_no_lock` and `join_no_state_var` take a `timeout` and return
whether things went wrong instead of blocking forever. Their commands
use no timeout and may hang until interrupted, as may
`osdemos-dining --deadlock`. The unfixed `atomicity_demo` and
`ordering_demo` raise `RuntimeError` where the bug strikes; their
commands report it and exit with status 1.

## What it does not do

The process demos need `os.fork` and so run only on POSIX systems such
as Linux and macOS. Addresses printed by `osdemos-mem`, `osdemos-va`
and `osdemos-t1` are Python object identities, not raw machine
addresses.