# starr

Helpers for scripts run by the Starr apps (Lidarr, Prowlarr, Radarr,
Readarr and Sonarr) through *Settings → Connect → Custom Script*, and a
small settings object for their APIs.

## Installing

```
pip install .
```

## Reading a custom script event

When a Starr app runs your script it describes the event in environment
variables. `starr.starrcmd.event.new()` checks `radarr_eventtype`,
`sonarr_eventtype`, `lidarr_eventtype`, `readarr_eventtype` and
`prowlarr_eventtype` in that order and returns a `CmdEvent` holding the
first app found (`App`) and its event type (`Event`; a type the package
does not know is kept as the plain string). The per-app modules turn the
rest of the environment into a dataclass.

```python
from starr.starrcmd.event import App, Event, new
from starr.starrcmd.radarr import get_radarr_download, get_radarr_grab

cmd = new()  # raises NoEventFoundError when no *_eventtype variable is set

if cmd.app is App.RADARR:
    if cmd.type == Event.GRAB:
        grab = get_radarr_grab(cmd)
        print(grab.title, grab.size)
    elif cmd.type == Event.DOWNLOAD:
        download = get_radarr_download(cmd)
        print(download.title, download.file_path)
```

Asking for data of an event other than the current one raises
`InvalidEventError`. A value that does not fit its field (for instance an
integer field holding text, or a date in an unknown layout) raises
`EnvParseError`. Variables that are missing or empty leave the field at its
zero value: an empty string, `0`, `False`, an empty list, or `None` for a
date.

Every getter, and `new()` itself, takes an optional `environ` mapping used
in place of `os.environ`, which makes handlers easy to test:

```python
from starr.starrcmd.event import new
from starr.starrcmd.sonarr import get_sonarr_rename

env = {"sonarr_eventtype": "Rename", "sonarr_series_id": "12345"}
cmd = new(env)
print(get_sonarr_rename(cmd, env).id)  # 12345
```

`new_must()` behaves like `new()` and raises `NoEventFoundError` when no
event is set; `new_must_no_panic()` returns an empty `CmdEvent` instead.

Modules per application, each with its event dataclasses and
`get_<app>_<event>(cmd, environ=None)` functions:

- `starr.starrcmd.lidarr`
- `starr.starrcmd.prowlarr`
- `starr.starrcmd.radarr`
- `starr.starrcmd.readarr`
- `starr.starrcmd.sonarr`

List fields are split on `,` or `|` as the apps write them. Dates are read
as UTC `datetime` values from either `1/2/2006 3:04:05 PM` or
`01/02/2006 15:04:05`; `starr.starrcmd.parser.parse_time()` does this on its
own. `env_field()` and `fill_from_env()` in the same module let you declare
and fill your own dataclasses from environment variables.

## Connection settings

```python
from starr.config import new_config

config = new_config("placeholder", "http://localhost:8989", 0)
```

`Config` holds the API key, URL, optional HTTP basic-auth and login
credentials, and a timeout in seconds; a timeout of zero selects the
default of 30. `starr.config` also defines the error classes
`StarrError`, `InvalidStatusCodeError`, `NilClientError`,
`NilInterfaceError`, `InvalidAPIKeyError` and `RequestError`.

## What this package does not do

It makes no HTTP requests. There is no client for the apps' APIs (series,
tags, system status and the like); `Config` only holds the settings such a
client would use.

## Running the tests

```
pip install .[test]
pytest
```