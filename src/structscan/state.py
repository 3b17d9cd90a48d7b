# structscan/state.py

# Process-wide CLI state. The scan itself never reads from here; it only
# receives its options as arguments.

g = {
    "parser": None,
}


# Rendered events, in emission order (see events.append_event).
events = []


def reset():
    for k in g:
        g[k] = None
    events[:] = []
