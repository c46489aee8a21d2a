"""OpenSBP formatting utilities.

Every numeric field is rendered with exactly three decimal places.
Retracts reference the ``&safeZ`` variable declared in the init block.
"""
from typing import List, Optional

SAFE_Z_REF = '%(safeZ)'
BANNER = "' " + "=" * 68


def format_number(value: float, precision: int = 3) -> str:
    """
    Format a numeric field for OpenSBP output.

    Args:
        value: The value to format
        precision: Number of decimal places (default 3)

    Returns:
        Formatted string representation
    """
    return f"{value:.{precision}f}"


def comment(text: str = '') -> str:
    """Return an OpenSBP comment line."""
    if not text:
        return "'"
    return f"' {text}"


def with_note(command: str, note: Optional[str] = None) -> str:
    """Append a trailing comment to a command line."""
    if not note:
        return command
    return f"{command}  ' {note}"


def declare_variable(name: str, value: float) -> str:
    """Return a ``&name=value`` declaration."""
    return f"&{name}={format_number(value)}"


def jog_xy(x: float, y: float, note: Optional[str] = None) -> str:
    """J2 rapid move in XY."""
    return with_note(f"J2,{format_number(x)},{format_number(y)}", note)


def jog_z_safe(note: Optional[str] = None) -> str:
    """JZ rapid to the declared safe Z height."""
    return with_note(f"JZ,{SAFE_Z_REF}", note)


def move_xy(x: float, y: float, note: Optional[str] = None) -> str:
    """M2 cutting move in XY at the current Z."""
    return with_note(f"M2,{format_number(x)},{format_number(y)}", note)


def move_z(z: float, note: Optional[str] = None) -> str:
    """MZ cutting move along Z."""
    return with_note(f"MZ,{format_number(z)}", note)


def helical_circle(
    start_x: float,
    start_y: float,
    i: float,
    j: float,
    z: float,
    note: Optional[str] = None
) -> str:
    """
    CG full circle that spirals down to ``z`` while cutting.

    The circle starts and ends at (start_x, start_y); I/J are the offsets
    from the start point to the circle center. The trailing fields
    request a single repetition with spiral plunge enabled, so the descent
    is spread over the revolution instead of plunging at the start point.

    Args:
        start_x: Start/end X coordinate on the circle
        start_y: Start/end Y coordinate on the circle
        i: X offset to center
        j: Y offset to center
        z: Depth reached at the end of the revolution
        note: Optional trailing comment

    Returns:
        CG command string
    """
    return with_note(
        f"CG,,{format_number(start_x)},{format_number(start_y)},"
        f"{format_number(i)},{format_number(j)},T,1,{format_number(z)},1,,,1",
        note
    )


def generate_header(
    app_name: str,
    description: str,
    generated_at: str,
    version: str,
    units: str,
    material_thickness: Optional[float] = None,
    bit_diameter: Optional[float] = None,
    notes: Optional[str] = None
) -> List[str]:
    """
    Generate the program header comment block.

    Args:
        app_name: Name of the generating app
        description: One-line operation summary
        generated_at: Human readable generation timestamp
        version: App version string
        units: Work units label ('in' or 'mm')
        material_thickness: Optional material thickness annotation
        bit_diameter: Optional bit diameter annotation
        notes: Optional free-form notes

    Returns:
        List of comment lines
    """
    lines = [
        BANNER,
        comment(f"CNC Cobot Workshop: {app_name}"),
        comment(description),
        BANNER,
        comment(f"Generated: {generated_at}"),
        comment(f"App Version: {version}"),
    ]
    if material_thickness:
        lines.append(comment(f"Material Thickness: {format_number(material_thickness)} {units}"))
    if bit_diameter:
        lines.append(comment(f"Bit Diameter: {format_number(bit_diameter)} {units}"))
    if notes:
        lines.append(comment(f"Notes: {notes}"))
    lines.append(comment())
    return lines


def generate_init(
    safe_z: float,
    feed_rate: float,
    plunge_rate: float,
    depth: float,
    spindle_startup_time: float
) -> List[str]:
    """
    Generate the initialization block.

    Declares the run's named values, sets move speeds, starts the spindle
    and moves to safe Z.
    """
    return [
        comment("=== Initialization ==="),
        declare_variable('safeZ', safe_z),
        declare_variable('plungeRate', plunge_rate),
        declare_variable('feedRate', feed_rate),
        declare_variable('depth', depth),
        '',
        f"MS,{format_number(feed_rate)},{format_number(feed_rate)}",
        f"VS,,,{format_number(plunge_rate)}",
        '',
        with_note("C9", "Select tool"),
        with_note("C6", "Start spindle"),
        with_note(f"PAUSE {format_number(spindle_startup_time)}", "Wait for spindle"),
        '',
        jog_z_safe("Move to safe Z"),
        '',
    ]


def generate_footer(return_home: bool = True) -> List[str]:
    """
    Generate the cleanup block.

    Args:
        return_home: Jog back to 0,0 before ending

    Returns:
        List of footer lines
    """
    lines = [
        '',
        comment("Cleanup"),
        jog_z_safe("Return to safe Z"),
        with_note("C7", "Spindle off"),
    ]
    if return_home:
        lines.append(jog_xy(0, 0, "Return to home position"))
    lines.append("END")
    return lines
