# storekeep

The building blocks of a small shop's record keeping: records for products,
stock batches and orders, a layout size configuration, and the SQLite schema
that stores sales, stock and debts.

## Installation

```
pip install .
```

Add the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Layout configuration

`storekeep.config.SizeConfigManager` holds the screen proportions of the
interface as two records, `side_bar` (a `SideBar`) and `dash_board` (a
`Dashboard`), each with `width_ratio` and `height_ratio`, both `0.0` by
default.

`load_file(file_name)` reads a JSON file and takes the `SIDEBAR` section
from it:

```json
{
  "SIDEBAR": {"WIDTH_RATIO": 0.2, "HEIGHT_RATIO": 1.0}
}
```

```python
from storekeep.config import SizeConfigManager

sizes = SizeConfigManager()
sizes.load_file("size_config.json")
print(sizes.side_bar.width_ratio, sizes.side_bar.height_ratio)
```

If the file cannot be opened, `OSError` is raised. Content that is not valid
JSON, is not a JSON object, or has missing or non-numeric values sets the
side bar ratios to `0.0`. The dashboard ratios are not read from the file.

## Core records

`storekeep.core` holds plain dataclass records:

- `ProductCore`: `id`, `name`, `price`, `note`.
- `BatchCore`: a batch of one product from a supplier, with its dates,
  import and export prices, original and remaining quantity, and a note.
- `OrderCore`: `id`, `sale_date`, `payment_history` (a date and amount
  pair), `total_price`, `note`.

It also holds the integer enums `DebtType` (`NONE`, `MONTH`, `SEASON`),
`CommandAction` (`GET`, `CREATE`, `UPDATE`, `DELETE`, `CHECK`, `EXECUTE`)
and `ResourceType` (`CUSTOMER`, `ORDER`, `PRODUCT`, `BATCH`). A `Command`
pairs an `action` with a `resource_type`:

```python
from storekeep.core import Command, CommandAction, ResourceType

command = Command(CommandAction.GET, ResourceType.PRODUCT)
```

## Database

`storekeep.database.Database` is a named SQLite connection. Instances made
with the same name share one connection; with no name the name
`storeAppConnection` is used.

- `open(file_path)` opens or creates the SQLite file (closing any connection
  already open under that name) and switches foreign keys on.
- `create_tables()` creates every table that does not exist yet: customers,
  suppliers, products, batches, orders, order items, interest transactions,
  payment transactions and customer statistics.
- `is_open()` tells whether the connection is open, `file_path` gives the
  file last opened, and `close()` closes the connection.

Failures to open the file, to run a statement, or calling `create_tables`
on a closed connection raise `DatabaseError`.

```python
from storekeep.database import Database

with Database("store") as db:
    db.open("store.sqlite3")
    db.create_tables()
    assert db.is_open()
```

The connection closes when the `with` block ends. Outside a `with` block,
call `close()` yourself.

## What the package does not do

The package sets up the database schema but has no functions to add, read,
change or delete customers, products, batches or orders in it, and it does
not compute debts or interest. It has no user interface and no command to
run.