"""Example writing the same API response as XML and JSON."""

from datetime import datetime, timezone

from dualformat import FormatRegistry, IdentifierRegistry, XMLFormat

MOTOR = {
    "id": "60a1f2b3c4d5e6f708192a3b",
    "designation": "F10-4T",
    "manufacturer": "AeroTech",
    "diameter": 0.029,
    "length": 0.124,
    "delays": ["4", "7", "10"],
    "updated": datetime(2021, 4, 12, 18, 30, tzinfo=timezone.utc),
}


def write_motor(fmt):
    """Write the motor fields; the same calls work for any format."""
    fmt.write_id("motor-id", MOTOR["id"])
    fmt.write_element("designation", MOTOR["designation"])
    fmt.write_element(
        "manufacturer", {"name": MOTOR["manufacturer"], "abbrev": "AT"}
    )
    fmt.write_element("diameter", MOTOR["diameter"])
    fmt.write_length_list("lengths", [MOTOR["length"]])
    fmt.write_element_list("delays", MOTOR["delays"])
    fmt.write_element("updated-on", MOTOR["updated"])
    # Optional fields can be written unconditionally
    fmt.write_element("discontinued", None)


def main():
    """Render the motor as JSON and as legacy-compatible XML."""
    registry = IdentifierRegistry()

    # Pick the format from a request path, as an HTTP handler would
    json_fmt = FormatRegistry.for_path("/api/v1/motor.json", root="motor-info")
    write_motor(json_fmt)
    print(json_fmt.render())

    xml_fmt = XMLFormat(root="motor-info", compat=True, registry=registry)
    write_motor(xml_fmt)
    print(xml_fmt.render())

    # A legacy client sends back the integer it received
    legacy_id = registry.lookup_or_assign(MOTOR["id"])
    print(f"{legacy_id} -> {xml_fmt.to_id(legacy_id)}")


if __name__ == "__main__":
    main()
