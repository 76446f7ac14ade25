# crop-tracker

A small HTTP service that keeps a record of farm fields, what was sown on
them and what was harvested. Data is stored in a SQLite file and exchanged
as JSON.

## Installing

```
pip install .
```

## Running

```
crop-tracker
```

By default the server listens on `0.0.0.0:8080` and stores its data in
`data.db` in the current directory; the tables are created if they are
missing. The options are:

| Option   | Default   | Meaning                  |
|----------|-----------|--------------------------|
| `--db`   | `data.db` | SQLite database file     |
| `--host` | `0.0.0.0` | address to listen on     |
| `--port` | `8080`    | port to listen on        |

The server is Flask's built-in development server.

## Endpoints

| Method | Path        | Purpose                     |
|--------|-------------|-----------------------------|
| POST   | `/fields`   | create a field              |
| GET    | `/fields`   | list all fields             |
| POST   | `/sowings`  | record a sowing on a field  |
| GET    | `/sowings`  | list all sowings            |
| POST   | `/harvest`  | record a harvest on a field |
| GET    | `/harvest`  | list all harvests           |

### Fields

```json
{"name": "North plot", "area_ha": 12.5, "region": "Valley"}
```

`name` and `region` must be non-empty and `area_ha` must be positive.

### Sowings

```json
{"field_id": 1, "crop": "Wheat", "sowed_at": "2025-04-06"}
```

`field_id` must be positive and refer to an existing field; `crop` and
`sowed_at` must be non-empty. `sowed_at` is stored as given, as text.

### Harvests

```json
{"field_id": 1, "crop": "Wheat", "yield_t_per_ha": 4.5}
```

`field_id` must be positive and refer to an existing field, `crop` must be
non-empty and `yield_t_per_ha` must not be negative.

### Responses

- A successful POST answers `200` with the stored record, including its new
  `id`.
- Missing keys take empty values (`0`, `0.0` or `""`) before validation.
- A body that is not JSON, not a JSON object, or holds a value of the wrong
  type, and any record that fails validation, answers `400` with
  `{"error": "..."}`.
- A database error answers `500` with `{"error": "..."}`.
- A list answers with the records in table order; on an empty table it
  answers `null`.

## Using it from Python

```python
from crop_tracker.db import init_db
from crop_tracker.app import create_app

conn = init_db("data.db")
app = create_app(conn)
client = app.test_client()
client.post("/fields", json={"name": "North plot", "area_ha": 12.5, "region": "Valley"})
print(client.get("/fields").get_json())
```

The storage layer can also be used without HTTP:

```python
from crop_tracker.db import init_db
from crop_tracker.fields import create_field, list_fields
from crop_tracker.models import Field

conn = init_db(":memory:")
field = create_field(conn, Field(name="North plot", area_ha=12.5, region="Valley"))
print(field.id, list_fields(conn))
```

- `crop_tracker.models` holds the frozen dataclasses `Field`, `Sowing` and
  `Harvest`, each with `from_json(data)` and `to_json()`, and
  `ValidationError`, a `ValueError`.
- `crop_tracker.db` has `init_db(path)`, which opens the database and calls
  `create_tables(conn)`.
- `crop_tracker.fields` has `create_field`, `list_fields` and
  `field_exists(conn, field_id)`.
- `crop_tracker.sowings` has `create_sowing` and `list_sowings`.
- `crop_tracker.harvests` has `add_harvest` and `list_harvests`.

The create functions raise `ValidationError` on invalid input and return the
record with its new `id`; the list functions return a list of records.

## What it does not do

Records can only be created and listed. There is no way to fetch a single
record, edit or delete one, or filter the lists, and there is no
authentication.

## Tests

```
pip install .[test]
pytest
```