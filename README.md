# pingdomkit

Data models for the Pingdom monitoring API. The package builds the
parameters and JSON bodies you send for checks, maintenance windows,
occurrences, contacts and teams, checks them for values the API would
reject, and decodes the JSON the API returns into dataclasses.

It has no dependencies beyond the standard library.

## What it does not do

pingdomkit does not talk to the network. There is no HTTP client, no
service object, no authentication handling and no command-line tool: you
send the requests with the HTTP library of your choice and hand the
response bodies to the parsing functions described below.

## Installation

```
pip install pingdomkit
```

## Modules

| Module | Contents |
| --- | --- |
| `pingdomkit.checks` | `HttpCheck`, `PingCheck`, `TCPCheck`, `DNSCheck`, `SummaryPerformanceRequest`, `join_ids`, `validate_common_parameters` |
| `pingdomkit.maintenance` | `MaintenanceWindow`, `MaintenanceWindowDelete` |
| `pingdomkit.occurrences` | `Occurrence`, `ListOccurrenceQuery`, `parse_occurrence_list`, `parse_occurrence_details` |
| `pingdomkit.contacts` | `Contact`, `NotificationTargets`, `SMSNotification`, `EmailNotification`, `APNSNotification`, `AGCMNotification`, `ContactTeam` |
| `pingdomkit.teams` | `Team` |
| `pingdomkit.responses` | response dataclasses and the `parse_*` functions |
| `pingdomkit.errors` | `PingdomError`, `ValidationError`, `MissingIdError`, `BadResolutionError` |

## Building check parameters

```python
from pingdomkit.checks import HttpCheck, TCPCheck

check = HttpCheck(name="Homepage", hostname="example.com", resolution=5, url="/")
check.validate()               # raises ValidationError on bad fields
form = check.post_params()     # dict of str -> str, with "type": "http"

tcp = TCPCheck(name="SMTP", hostname="mail.example.com", port=25)
tcp.validate()
update_form = tcp.put_params()
```

`put_params()` returns the fields as strings, empty ones included, so that
a PUT can also clear values; zero-valued numeric options such as
`resolution` are left out. `post_params()` drops the empty values and adds
the check type (`http`, `ping`, `tcp` or `dns`).

Validation rules:

- every check needs a `name` and a `hostname`, and `resolution` must be
  0 (the API default), 1, 5, 15, 30 or 60;
- an `HttpCheck` may not set both `should_contain` and `should_not_contain`;
- a `TCPCheck` needs a `port` from 1 to 65535;
- a `DNSCheck` needs `expected_ip` and `name_server`.

`HttpCheck.request_headers` is sent as `requestheader0`, `requestheader1`, …
in sorted header order, and `username`/`password` as a single `auth`
parameter.

`SummaryPerformanceRequest.validate()` raises `MissingIdError` when `id` is 0
and `BadResolutionError` unless `resolution` is empty, `"hour"`, `"day"` or
`"week"`; `get_params()` returns the query parameters.

## Maintenance windows and occurrences

```python
from pingdomkit.maintenance import MaintenanceWindow, MaintenanceWindowDelete
from pingdomkit.occurrences import ListOccurrenceQuery, Occurrence

window = MaintenanceWindow(description="Upgrade", from_=1700000000, to=1700003600)
window.validate()
params = window.post_params()

delete = MaintenanceWindowDelete(maintenance_ids="1,2,3")
delete.validate()
delete_params = delete.delete_params()

query = ListOccurrenceQuery(maintenance_id=224724).to_params()

occurrence = Occurrence(from_=1700000000, to=1700007200)
occurrence.validate()
body = occurrence.render_for_json_api()   # '{"from":1700000000,"to":1700007200}'
```

Fields named `from` in the API are `from_` in Python.

## Contacts and teams

```python
from pingdomkit.contacts import Contact, NotificationTargets, EmailNotification
from pingdomkit.teams import Team

contact = Contact(
    name="On call",
    notification_targets=NotificationTargets(
        email=[EmailNotification(address="oncall@example.com", severity="HIGH")]
    ),
)
contact.validate()
payload = contact.render_for_json_api()

team = Team(name="Operations", member_ids=[1, 2])
team.validate()
payload = team.render_for_json_api()
```

`Contact.render_for_json_api()` sends `name`, `paused` and the notification
targets, leaving out target kinds with no entries.

## Reading responses

Each `parse_*` function takes a response body as `str`, `bytes` or an
already decoded mapping.

```python
from pingdomkit.responses import parse_check_list, parse_check_details

for check in parse_check_list(body):
    print(check.id, check.name, check.type.name)

detail = parse_check_details(detail_body)
print(detail.type.http, detail.team_ids)
```

`parse_check_details` fills in `team_ids` from the check's `teams`. The
single-object parsers return `None` when the body lacks the object, except
`parse_occurrence_details`, which returns an empty `Occurrence`.

Other parsers: `parse_maintenance_list`, `parse_maintenance_details`,
`parse_probe_list`, `parse_team_list`, `parse_team_details`,
`parse_contact_list`, `parse_contact_details`, `parse_occurrence_list`.
Other responses, such as `SummaryPerformanceResponse`, `ResultsResponse`,
`PingdomResponse` and `TeamDeleteResponse`, are built with their
`from_dict` class methods.

## Errors

```python
from pingdomkit.errors import PingdomError

raise PingdomError.from_error_body(error_body)
# str(error) == "400 Bad Request: This is an error"
```

`ValidationError` is a subclass of `ValueError`; `MissingIdError` and
`BadResolutionError` derive from it.

## Running the tests

```
pip install pingdomkit[test]
pytest
```