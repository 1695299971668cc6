# (running, auto_start) -> display label
STATUS_LABELS: dict[tuple[bool, bool], str] = {
    (False, False): "Off | ✗",
    (False, True): "Off | ↻",
    (True, False): "On | ✗",
    (True, True): "On | ↻",
}
