# designpatterns

Compact, working examples of classic design patterns and two of the SOLID
principles. Each pattern lives in its own module and can be imported and
exercised directly. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it shows |
| --- | --- |
| `designpatterns.abstract_factory` | Abstract factory: wooden doors and handles, modern and classic UI widgets |
| `designpatterns.builder` | Builder: a fluent `CarStudio`, and house builders run by a `HouseDirector` |
| `designpatterns.factory_method` | Factory method: database connection and logger factories |
| `designpatterns.functional_options` | Functional options: `DBClient` and `HTTPClient` configured by option functions |
| `designpatterns.object_pool` | Object pool: `ObjectPool` and `DBConnectionPool` |
| `designpatterns.simple_factory` | Simple factory: shapes created by `ShapeType` |
| `designpatterns.chain_of_responsibility` | Chain of responsibility: spending approvals and request handlers |
| `designpatterns.template_method` | Template method: preparing coffee, tea and milk |
| `designpatterns.context_pattern` | Giving up on slow work after a deadline, behind a small HTTP server |
| `designpatterns.solid_lsp` | Liskov substitution: birds and shapes |
| `designpatterns.solid_srp` | Single responsibility: teachers, students and classes |

## Examples

Abstract factory:

```python
from designpatterns.abstract_factory import ClassicUIFactory, ModernUIFactory, WoodenDoorFactory

ModernUIFactory().create_button().render_button()        # 'Rendering a modern button'
ClassicUIFactory().create_text_box().render_text_box()   # 'Rendering a classic text box'

door = WoodenDoorFactory().create_door()
door.open()   # prints to stderr and returns 'Opening wooden door'
```

Builder:

```python
from designpatterns.builder import CarStudio, HouseDirector, WoodenHouseBuilder

studio = CarStudio()
studio.brand("sky").speed(120).engine("audi")
car = studio.build()      # Car(wheel=0, engine='audi', max_speed=120, brand='sky')
car.brief()               # writes the description to stderr and returns it

house = HouseDirector(WoodenHouseBuilder()).construct_house()
house.has_garage          # True
house.show()              # prints and returns the structure line
```

`HouseDirector.construct_house()` raises `ValueError` when no builder is set.

Factory method:

```python
from designpatterns.factory_method import ConsoleLoggerFactory, MySQLConnFactory

MySQLConnFactory().create_database_conn().connect()   # 'Connected to MySQL database'
ConsoleLoggerFactory().create_logger().log("hello")   # prints 'Log to console: hello'
```

Functional options:

```python
from datetime import timedelta
from designpatterns.functional_options import (
    db_with_timeout, new_db_client, new_http_client, with_address, with_ssl, with_timeout,
)

client = new_db_client(with_address("localhost:5432"), db_with_timeout(timedelta(seconds=5)), with_ssl(True))
# defaults: address 'localhost:3306', timeout 10 s, retries 3 s, no SSL

http = new_http_client(with_timeout(timedelta(seconds=5)))
response = http.get("http://localhost:8080/")   # HTTPResponse(status_code, headers, body)
```

`HTTPClient.get` returns error statuses as responses; connection failures and
timeouts raise `OSError`.

Simple factory:

```python
from designpatterns.simple_factory import ShapeType, new_shape

new_shape(ShapeType.CIRCLE).draw()   # 'Drawing a Circle'
new_shape("square").draw()           # 'Drawing a Square'
new_shape("triangle")                # raises ValueError
```

Object pool:

```python
from designpatterns.object_pool import DBConnectionPool, ObjectPool

pool = ObjectPool(3)       # objects numbered 0, 1, 2
obj = pool.acquire()       # blocks until an object is free
pool.release(obj)

db_pool = DBConnectionPool(3, creation_delay=0.0)   # two connections made up front
conn = db_pool.acquire(timeout=1.0)
conn.query()               # 'Querying database with connection ID: 1'
db_pool.release(conn)
```

When no connection becomes free within the timeout, `DBConnectionPool.acquire`
creates a new one if the pool has room and raises `PoolTimeoutError` otherwise.
A connection released into a full pool is dropped.

Chain of responsibility:

```python
from designpatterns.chain_of_responsibility import CFO, AuthHandler, BusinessHandler, Director, LoggerHandler, Manager, Request

manager = Manager(1000)
manager.set_next(Director(5000)).successor.set_next(CFO(10000))
manager.approve(1500)    # 'Director approved the amount: 1500'
manager.approve(12000)   # 'No one can approve the amount: 12000'

logger, auth = LoggerHandler(), AuthHandler()
logger.set_next(auth)
auth.set_next(BusinessHandler())
logger.handle(Request("http://example.com"))   # the three messages, in order
```

Template method:

```python
from designpatterns.template_method import Tea

Tea().prepare()   # ['Boiling water', 'Steeping the tea', 'Pouring into cup']
```

Deadlines:

```python
from designpatterns.context_pattern import handle_request

handle_request(timeout=5.0, delay=3.0)   # (HTTPStatus.OK, 'Result: Data from DB')
handle_request(timeout=0.1, delay=3.0)   # (HTTPStatus.GATEWAY_TIMEOUT, 'Request timed out\n')
```

## Commands

```
designpatterns-context [--host HOST] [--port PORT] [--lifetime SECONDS]
designpatterns-lsp
designpatterns-srp
```

- `designpatterns-context` serves HTTP GET requests (port 8080 by default),
  answering each with the fetched data or a gateway timeout, and shuts down
  after the lifetime (5 seconds by default).
- `designpatterns-lsp` prints what a sparrow and a penguin do when asked to fly,
  and the areas of a 3×4 rectangle and a square of side 5.
- `designpatterns-srp` builds a class from a teacher and a student and prints
  their names.

## What it does not do

These are illustrations, not working integrations. The database connections
and pools talk to no database: `connect()` and `query()` only return messages.
`FileLogger` prints its message and writes no file. The request handlers in
the chain of responsibility check nothing; they only report each step. The
server started by `designpatterns-context` serves only for its lifetime and
simulates the database fetch with a delay.