# cometa

`cometa` is the core of a small game engine. It is written in Python and
uses numpy for the vector maths. It has these parts:

- **Layers and events** (`cometa.layer`, `cometa.onion`, `cometa.events`,
  `cometa.event_bus`). An `Onion` holds a stack of `Layer` objects. It
  initialises and closes them in the order they were pushed, and it updates
  them in reverse order. An `EventBus` sends keyboard and mouse events to the
  layers subscribed to each `EventType`. Delivery stops at the first layer
  that calls `event.set_handled()`.
- **Sparse set** (`cometa.sparse_set`). `SparseSet` stores values keyed by
  non-negative integers. Adding, looking up and swap-removing a value take
  constant time, and iteration goes over the dense storage.
- **Physics** (`cometa.colliders`, `cometa.collision`, `cometa.physics`).
  `BoxCollider` and `SphereCollider` describe the shapes and their inertia
  tensors. `dispatch` sends each pair of shapes to the right test:
  `intersect_box_box` (separating axis), `intersect_box_sphere` or
  `intersect_sphere_sphere`. `PhysicsManager.step` integrates `RigidBody`
  state under gravity, finds contacts between `Body` objects and resolves
  them with impulses, Baumgarte stabilisation and Coulomb friction.
- **Timing and input** (`cometa.timing`, `cometa.input`). `Time` measures the
  delta time between frames and can use any clock function. `Input` reads the
  cursor, keys and mouse buttons from a window backend that you supply. It
  also tracks how Escape and the left mouse button change the `CursorMode`.
- **A game** (`cometa.ship_game`). `ShipGameLayer` spawns falling obstacles
  at a rate that keeps increasing, and it keeps a score. R resets the game
  and P pauses or resumes it.
- **Application** (`cometa.application`). `Application` initialises the
  managers and the ship-game layer, runs the frame loop and closes
  everything in order.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Running

```
cometa --frames 600
```

This runs the ship-game simulation with the `Time` and `PhysicsManager`
managers for 600 frames, then closes. If you leave out `--frames`, the loop
has nothing that stops it, so it runs until you interrupt it.

## Using the pieces

### Sparse set

```python
from cometa.sparse_set import SparseSet

entities = SparseSet()
entities.add(7, "ship")
entities.add(250, "rock")   # the sparse table grows as needed

assert 7 in entities
assert entities.get(250) == "rock"
assert len(entities) == 2

entities.pop(7)             # swap-remove: the last dense item moves into the gap
assert list(entities) == ["rock"]
```

### Maths helpers

```python
from cometa.cometa_math import scope, scope01, remap, approximately

scope(12.0, 0.0, 10.0)               # 10.0
scope01(-0.5)                        # 0.0
remap(5.0, 0.0, 10.0, 0.0, 100.0)    # 50.0
approximately(1.0, 1.0005, 0.001)    # True
```

### Layers and events

```python
from cometa.event_bus import EventBus
from cometa.events import EventType, KeyPressEvent
from cometa.layer import Layer
from cometa.onion import Onion


class HudLayer(Layer):
    def init(self):
        ...

    def update(self):
        ...

    def close(self):
        ...

    def handle_event(self, event):
        event.set_handled()


hud = HudLayer("hud")
onion = Onion()
onion.push_layer(hud)
onion.init()
onion.update()   # the layer pushed last is updated first
onion.close()

bus = EventBus()
bus.subscribe(EventType.KEY_PRESS, hud)
assert bus.notify(KeyPressEvent(key=82)) is True
```

### Collisions and physics

```python
from cometa.colliders import BoxCollider, SphereCollider
from cometa.collision import Transform, dispatch
from cometa.physics import Body, PhysicsManager, RigidBody

contact = dispatch(BoxCollider(), Transform(),
                   SphereCollider(0.5), Transform(position=(0.9, 0.0, 0.0)))
assert contact.collided

ball = Body("ball", Transform(position=(0.0, 2.0, 0.0)),
            SphereCollider(0.5), RigidBody(mass=1.0))
ground = Body("ground", Transform(), BoxCollider((5.0, 0.5, 5.0)))

physics = PhysicsManager()
collisions = physics.step([ball, ground], 1 / 60)
```

## What it does not do

The package has no window, no rendering, no user interface and no sound.
Bodies carry only a transform, a collider and rigid-body state, with no
meshes, materials or lights. `Input` cannot read a real keyboard or mouse
unless you give it a backend that implements `poll_events`,
`get_cursor_pos`, `get_key`, `get_mouse_button` and `set_cursor_mode`.

## Tests

```
pytest
```