import json

import pytest

from pingdomkit.contacts import (
    Contact,
    ContactTeam,
    EmailNotification,
    NotificationTargets,
    SMSNotification,
)
from pingdomkit.responses import (
    CheckResponse,
    CheckResponseDNSDetails,
    CheckResponseHTTPDetails,
    CheckResponseTag,
    CheckResponseType,
    CheckTeamResponse,
    MaintenanceCheckResponse,
    MaintenanceResponse,
    PingdomResponse,
    ProbeResponse,
    Result,
    ResultsResponse,
    SummaryPerformanceMap,
    SummaryPerformanceResponse,
    SummaryPerformanceSummary,
    TeamDeleteResponse,
    TeamMemberResponse,
    TeamResponse,
    parse_check_details,
    parse_check_list,
    parse_contact_details,
    parse_contact_list,
    parse_maintenance_details,
    parse_maintenance_list,
    parse_probe_list,
    parse_team_details,
    parse_team_list,
)

USER_AGENT = "Mozilla/5.0 (compatible; ExampleBot/1.0)"

DETAILED_CHECK_JSON = """
{
    "id" : 85975,
    "name" : "My check 7",
    "resolution" : 1,
    "sendnotificationwhendown" : 0,
    "notifyagainevery" : 0,
    "notifywhenbackup" : false,
    "created" : 1240394682,
    "type" : {
        "http" : {
            "url" : "/",
            "port" : 80,
            "requestheaders" : {
                "User-Agent" : "%s",
                "Prama" : "no-cache"
            }
        }
    },
    "hostname" : "s7.mydomain.com",
    "status" : "up",
    "severity_level": "HIGH",
    "lasterrortime" : 1293143467,
    "lasttesttime" : 1294064823,
    "tags": [],
    "responsetime_threshold": 2300
}
""" % USER_AGENT

DETAILED_DNS_CHECK_JSON = """
{
    "id": 1234567,
    "name": "test-dns",
    "resolution": 1,
    "sendnotificationwhendown": 6,
    "notifyagainevery": 0,
    "notifywhenbackup": true,
    "created": 1616616166,
    "type": {
        "dns": {
            "expectedip": "2606:2800:220:1:248:1893:25c8:1946",
            "nameserver": "a.iana-servers.net"
        }
    },
    "hostname": "example.com",
    "ipv6": true,
    "responsetime_threshold": 30000,
    "custom_message": "",
    "integrationids": [],
    "status": "unknown",
    "tags": [],
    "probe_filters": [],
    "userids": [12345678]
}
"""

CONTACTS_JSON = """
{
    "contacts": [
        {
            "id": 1,
            "name": "John Doe",
            "paused": false,
            "type": "user",
            "owner": true,
            "notification_targets": {
                "email": [{"severity": "HIGH", "address": "john@example.com"}],
                "sms": [{"severity": "HIGH", "country_code": "00",
                         "number": "000001", "provider": "provider's name"}]
            },
            "teams": [{"id": 123456, "name": "The Dream Team"}]
        },
        {
            "id": 2,
            "name": "John \\"Hannibal\\" Smith",
            "paused": true,
            "type": "user",
            "notification_targets": {
                "email": [{"severity": "HIGH", "address": "hannibal@example.com"}],
                "sms": [{"severity": "HIGH", "country_code": "00",
                         "number": "000002", "provider": "provider's name"}]
            },
            "teams": []
        }
    ]
}
"""


def test_check_response_unmarshal():
    ck = CheckResponse.from_dict(json.loads(DETAILED_CHECK_JSON))
    assert ck.type.name == "http"
    assert ck.type.http is not None
    assert len(ck.type.http.request_headers) == 2
    assert ck.severity_level == "HIGH"


def test_dns_check_response_unmarshal():
    ck = CheckResponse.from_dict(json.loads(DETAILED_DNS_CHECK_JSON))
    assert ck.ipv6 is True
    assert ck.type.name == "dns"
    assert ck.type.dns == CheckResponseDNSDetails(
        expected_ip="2606:2800:220:1:248:1893:25c8:1946",
        name_server="a.iana-servers.net",
    )
    assert ck.user_ids == [12345678]


def test_check_response_type_rejects_multiple_objects():
    with pytest.raises(ValueError):
        CheckResponseType.from_json({"http": {}, "tcp": {}})


def test_check_response_type_tcp():
    result = CheckResponseType.from_json({"tcp": {"port": 22, "stringtosend": "hi"}})
    assert result.name == "tcp"
    assert result.tcp.port == 22
    assert result.tcp.string_to_send == "hi"
    assert result.http is None


def test_contact_list_unmarshal():
    contacts = parse_contact_list(CONTACTS_JSON)
    want_targets = NotificationTargets(
        sms=[
            SMSNotification(
                severity="HIGH", country_code="00", number="000001", provider="provider's name"
            )
        ],
        email=[EmailNotification(severity="HIGH", address="john@example.com")],
    )
    assert contacts[0].name == "John Doe"
    assert contacts[0].notification_targets == want_targets
    assert contacts[1] == Contact(
        id=2,
        paused=True,
        name='John "Hannibal" Smith',
        type="user",
        teams=[],
        notification_targets=NotificationTargets(
            sms=[
                SMSNotification(
                    severity="HIGH", country_code="00", number="000002", provider="provider's name"
                )
            ],
            email=[EmailNotification(severity="HIGH", address="hannibal@example.com")],
        ),
    )
    assert contacts[0].teams == [ContactTeam(id=123456, name="The Dream Team")]


def test_contact_details_and_create():
    body = {"contact": {"id": 23439}}
    assert parse_contact_details(body) == Contact(id=23439)
    assert parse_contact_details("{}") is None


def test_check_list():
    body = """{
        "checks": [
            {"hostname": "example.com", "id": 85975, "lasterrortime": 1297446423,
             "lastresponsetime": 355, "lasttesttime": 1300977363, "name": "My check 1",
             "resolution": 1, "status": "up", "type": "http",
             "tags": [{"name": "apache", "type": "a", "count": 2}],
             "responsetime_threshold": 2300},
            {"hostname": "mydomain.com", "id": 161748, "lasterrortime": 1299194968,
             "lastresponsetime": 1141, "lasttesttime": 1300977268, "name": "My check 2",
             "resolution": 5, "status": "up", "type": "ping",
             "tags": [{"name": "nginx", "type": "u", "count": 1}]},
            {"hostname": "example.net", "id": 208655, "lasterrortime": 1300527997,
             "lastresponsetime": 800, "lasttesttime": 1300977337, "name": "My check 3",
             "resolution": 1, "status": "down", "type": "http",
             "tags": [{"name": "apache", "type": "a", "count": 2}]}
        ]
    }"""
    want = [
        CheckResponse(
            id=85975,
            name="My check 1",
            last_error_time=1297446423,
            last_response_time=355,
            last_test_time=1300977363,
            hostname="example.com",
            resolution=1,
            status="up",
            response_time_threshold=2300,
            type=CheckResponseType(name="http"),
            tags=[CheckResponseTag(name="apache", type="a", count=2)],
        ),
        CheckResponse(
            id=161748,
            name="My check 2",
            last_error_time=1299194968,
            last_response_time=1141,
            last_test_time=1300977268,
            hostname="mydomain.com",
            resolution=5,
            status="up",
            type=CheckResponseType(name="ping"),
            tags=[CheckResponseTag(name="nginx", type="u", count=1)],
        ),
        CheckResponse(
            id=208655,
            name="My check 3",
            last_error_time=1300527997,
            last_response_time=800,
            last_test_time=1300977337,
            hostname="example.net",
            resolution=1,
            status="down",
            type=CheckResponseType(name="http"),
            tags=[CheckResponseTag(name="apache", type="a", count=2)],
        ),
    ]
    assert parse_check_list(body) == want


def test_check_create_response():
    body = '{"check":{"id":138631,"name":"My new HTTP check"}}'
    assert parse_check_details(body) == CheckResponse(id=138631, name="My new HTTP check")


def test_check_read():
    body = {
        "check": {
            "created": 1240394682,
            "hostname": "s7.mydomain.com",
            "id": 85975,
            "integrationids": [33333333, 44444444],
            "ipv6": False,
            "lasterrortime": 1293143467,
            "lasttesttime": 1294064823,
            "name": "My check 7",
            "notifyagainevery": 0,
            "notifywhenbackup": False,
            "probe_filters": [],
            "resolution": 1,
            "sendnotificationwhendown": 0,
            "responsetime_threshold": 2300,
            "status": "up",
            "tags": [],
            "teams": [{"id": 123456, "name": "Oncall"}],
            "type": {
                "http": {
                    "encryption": False,
                    "port": 80,
                    "requestheaders": {"User-Agent": USER_AGENT},
                    "url": "/",
                }
            },
        }
    }
    want = CheckResponse(
        id=85975,
        name="My check 7",
        resolution=1,
        created=1240394682,
        hostname="s7.mydomain.com",
        status="up",
        last_error_time=1293143467,
        last_test_time=1294064823,
        response_time_threshold=2300,
        teams=[CheckTeamResponse(name="Oncall", id=123456)],
        team_ids=[123456],
        type=CheckResponseType(
            name="http",
            http=CheckResponseHTTPDetails(
                url="/",
                encryption=False,
                port=80,
                request_headers={"User-Agent": USER_AGENT},
            ),
        ),
        integration_ids=[33333333, 44444444],
        tags=[],
        probe_filters=[],
    )
    assert parse_check_details(json.dumps(body).encode()) == want


def test_pingdom_response_messages():
    assert PingdomResponse.from_dict(
        {"message": "Modification of check was successful!"}
    ) == PingdomResponse(message="Modification of check was successful!")
    assert PingdomResponse.from_dict(json.loads('{"message":"Deletion of check was successful!"}')).message == (
        "Deletion of check was successful!"
    )


def test_summary_performance():
    body = {
        "summary": {
            "hours": [
                {"avgresponse": 222, "downtime": 0, "starttime": 1536926400,
                 "unmonitored": 0, "uptime": 3600},
                {"avgresponse": 225, "downtime": 0, "starttime": 1536930000,
                 "unmonitored": 0, "uptime": 3442},
            ]
        }
    }
    want = SummaryPerformanceResponse(
        summary=SummaryPerformanceMap(
            hours=[
                SummaryPerformanceSummary(
                    avg_response=222, downtime=0, start_time=1536926400, unmonitored=0, uptime=3600
                ),
                SummaryPerformanceSummary(
                    avg_response=225, downtime=0, start_time=1536930000, unmonitored=0, uptime=3442
                ),
            ]
        )
    )
    assert SummaryPerformanceResponse.from_dict(body) == want


def test_results():
    body = {
        "activeprobes": [259, 255, 93, 94, 87],
        "results": [
            {"probeid": 259, "time": 1563370611, "status": "up", "responsetime": 145,
             "statusdesc": "OK", "statusdesclong": "OK"},
            {"probeid": 87, "time": 1563370551, "status": "up", "responsetime": 56,
             "statusdesc": "OK", "statusdesclong": "OK"},
            {"probeid": 93, "time": 1563370491, "status": "up", "responsetime": 962,
             "statusdesc": "OK", "statusdesclong": "OK"},
            {"probeid": 255, "time": 1563370431, "status": "up", "responsetime": 395,
             "statusdesc": "OK", "statusdesclong": "OK"},
            {"probeid": 94, "time": 1563370371, "status": "up", "responsetime": 1084,
             "statusdesc": "OK", "statusdesclong": "OK"},
        ],
    }
    want = ResultsResponse(
        active_probes=[259, 255, 93, 94, 87],
        results=[
            Result(259, 1563370611, "up", 145, "OK", "OK"),
            Result(87, 1563370551, "up", 56, "OK", "OK"),
            Result(93, 1563370491, "up", 962, "OK", "OK"),
            Result(255, 1563370431, "up", 395, "OK", "OK"),
            Result(94, 1563370371, "up", 1084, "OK", "OK"),
        ],
    )
    assert ResultsResponse.from_dict(body) == want


def test_maintenance_list():
    body = """{
        "maintenance": [
            {"description": "Maintenance N", "id": 85975, "from": 1, "to": 1524048059,
             "recurrencetype": "none", "repeatevery": 0, "effectiveto": 1524048059,
             "checks": {"uptime": [12345, 23456], "tms": [1234, 8975]}}
        ]
    }"""
    want = [
        MaintenanceResponse(
            id=85975,
            description="Maintenance N",
            from_=1,
            to=1524048059,
            recurrence_type="none",
            repeat_every=0,
            effective_to=1524048059,
            checks=MaintenanceCheckResponse(uptime=[12345, 23456], tms=[1234, 8975]),
        )
    ]
    assert parse_maintenance_list(body) == want


def test_maintenance_create_and_read():
    assert parse_maintenance_details('{"maintenance": {"id": 85975}}') == MaintenanceResponse(
        id=85975
    )
    body = {
        "maintenance": {
            "id": 456,
            "description": "Particular maintenance window",
            "from": 1497520800,
            "to": 1497574800,
            "recurrencetype": "none",
            "repeatevery": 0,
            "effectiveto": 1497574800,
            "checks": {"uptime": [506206, 506233, 222], "tms": [123, 111]},
        }
    }
    assert parse_maintenance_details(body) == MaintenanceResponse(
        id=456,
        description="Particular maintenance window",
        from_=1497520800,
        to=1497574800,
        recurrence_type="none",
        repeat_every=0,
        effective_to=1497574800,
        checks=MaintenanceCheckResponse(uptime=[506206, 506233, 222], tms=[123, 111]),
    )


def test_probe_list():
    body = """{
        "probes": [
            {"id": 32, "country": "United States", "city": "Los Angeles",
             "name": "Los Angeles, CA", "active": true, "hostname": "s410.pingdom.com",
             "ip": "204.152.200.42", "countryiso": "US",
             "ipv6": "2607:fcd0:100:8d00::410", "region": "NA"},
            {"id": 184, "country": "Brazil", "city": "São Paulo",
             "name": "Sao Paulo 2, Brazil", "active": true, "hostname": "s4028.pingdom.com",
             "ip": "52.67.148.55", "countryiso": "BR",
             "ipv6": "2600:1f1e:d7c:fd05::4028", "region": "LATAM"}
        ]
    }"""
    want = [
        ProbeResponse(32, "United States", "Los Angeles", "Los Angeles, CA", True,
                      "s410.pingdom.com", "204.152.200.42", "2607:fcd0:100:8d00::410", "US", "NA"),
        ProbeResponse(184, "Brazil", "São Paulo", "Sao Paulo 2, Brazil", True,
                      "s4028.pingdom.com", "52.67.148.55", "2600:1f1e:d7c:fd05::4028", "BR",
                      "LATAM"),
    ]
    assert parse_probe_list(body.encode("utf-8")) == want


def test_team_list():
    body = {
        "teams": [
            {"id": 1, "name": "Team Rocket",
             "members": [{"id": 1, "name": "John Doe", "type": "user"}]},
            {"id": 2, "name": "The A-Team",
             "members": [
                 {"id": 2, "name": "John 'Hannibal' Smith", "type": "user"},
                 {"id": 3, "name": "Templeton 'Faceman' Peck", "type": "contact"},
             ]},
        ]
    }
    want = [
        TeamResponse(1, "Team Rocket", [TeamMemberResponse(1, "John Doe", "user")]),
        TeamResponse(
            2,
            "The A-Team",
            [
                TeamMemberResponse(2, "John 'Hannibal' Smith", "user"),
                TeamMemberResponse(3, "Templeton 'Faceman' Peck", "contact"),
            ],
        ),
    ]
    assert parse_team_list(body) == want


def test_team_details():
    assert parse_team_details('{"team": {"id": 12345678}}') == TeamResponse(id=12345678)
    body = {
        "team": {
            "id": 1,
            "name": "Team Rocket",
            "members": [
                {"id": 1, "name": "John Doe", "type": "user"},
                {"id": 4, "name": "Sidekick Jimmy", "type": "contact"},
            ],
        }
    }
    assert parse_team_details(body) == TeamResponse(
        id=1,
        name="Team Rocket",
        members=[
            TeamMemberResponse(1, "John Doe", "user"),
            TeamMemberResponse(4, "Sidekick Jimmy", "contact"),
        ],
    )


def test_team_delete():
    body = {"message": "Deletion of team 1234 was successful"}
    assert TeamDeleteResponse.from_dict(body) == TeamDeleteResponse(
        message="Deletion of team 1234 was successful"
    )


def test_empty_lists():
    assert parse_check_list("{}") == []
    assert parse_team_list("{}") == []
    assert parse_probe_list("{}") == []
    assert parse_maintenance_list("{}") == []
    assert parse_contact_list("{}") == []