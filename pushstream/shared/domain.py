import dataclasses
import datetime
import enum

import dacite


Domain = dataclasses.dataclass(kw_only=True, slots=True)

field = dataclasses.field

dump = dataclasses.asdict


def _timestamp(value):
    if isinstance(value, datetime.datetime):
        return value
    return datetime.datetime.fromisoformat(value)


DefaultConfig = dacite.Config(
    cast=[enum.Enum],
    type_hooks={datetime.datetime: _timestamp},
    strict=True,
)


def load(data_class, data, config: dacite.Config = DefaultConfig):
    return dacite.from_dict(data_class, data, config=config)
