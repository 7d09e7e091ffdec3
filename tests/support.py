from dns_probe.config import CheckConfig, RecordType


def make_config(**overrides) -> CheckConfig:
    values = {
        "server": "1.1.1.1",
        "domain": "example.com",
        "expected_output": "93.184.216.34",
        "port": 53,
        "record_type": RecordType.A,
    }
    values.update(overrides)
    return CheckConfig(**values)


class FakeResolver:
    def __init__(
        self,
        a=None,
        aaaa=None,
        cname=None,
        mx=None,
        ns=None,
        ptr=None,
        txt=None,
        errors=None,
    ):
        self.a = a or {}
        self.aaaa = aaaa or {}
        self.cname = cname or {}
        self.mx = mx or {}
        self.ns = ns or {}
        self.ptr = ptr or {}
        self.txt = txt or {}
        self.errors = errors or {}
        self.calls = []

    def _lookup(self, record_type: str, table: dict, name: str):
        self.calls.append((record_type, name))
        error = self.errors.get((record_type, name))
        if error is not None:
            raise error
        return list(table.get(name, []))

    def get_a(self, name: str):
        return self._lookup("A", self.a, name)

    def get_aaaa(self, name: str):
        return self._lookup("AAAA", self.aaaa, name)

    def get_cname(self, name: str):
        return self._lookup("CNAME", self.cname, name)

    def get_mx(self, domain: str):
        return self._lookup("MX", self.mx, domain)

    def get_ns(self, domain: str):
        return self._lookup("NS", self.ns, domain)

    def get_ptr(self, address: str):
        return self._lookup("PTR", self.ptr, address)

    def get_txt(self, domain: str):
        return self._lookup("TXT", self.txt, domain)


class RecordingFactory:
    """Resolver factory that hands out one FakeResolver and records its calls."""

    def __init__(self, resolver: FakeResolver):
        self.resolver = resolver
        self.calls = []

    def __call__(self, server, port, context):
        self.calls.append((server, port, context))
        return self.resolver
