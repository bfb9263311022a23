#!/usr/bin/env python3
"""
SDI Designer - Pump Sizing Report
=================================
Reads a JSON design file (inputs + pipe segments) and prints zone flows,
per-segment friction breakdown, TDH for both modes, the pump selection
criteria and design feedback.

Usage:
    python tdh_report.py design.json [--json] [--error-factor 1.1]

Design file format:
    {
        "inputs": {"lateral_length_ft": 126, "laterals_per_zone": 2, ...},
        "segments": [
            {"name": "Headworks to Zone Valve", "nominal_size": "1",
             "length_ft": 140, "elevation_change_ft": 5}
        ]
    }
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

sys.path.insert(0, str(Path(__file__).parent.parent))

from api.schemas import DesignRequest
from core.config import settings
from modules.design import DesignReport, run_design
from modules.design_rules import Severity
from modules.tdh import ModeHead

console = Console()

SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.SUGGESTION: "cyan",
    Severity.INFO: "dim",
}


def load_design(path: Path) -> DesignRequest:
    """Read and validate a design file."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return DesignRequest.model_validate(payload)


def mode_table(head: ModeHead) -> Table:
    """Per-segment friction breakdown for one operating mode."""
    table = Table(
        title=f"[bold]{head.mode.value} Mode[/bold] - {head.flow_gpm:.2f} GPM",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold white on blue",
        border_style="blue",
    )
    table.add_column("Segment", style="cyan")
    table.add_column("Velocity (ft/s)", justify="right")
    table.add_column("Elevation (ft)", justify="right")
    table.add_column("Friction (ft)", justify="right", style="green")

    for seg in head.segments:
        table.add_row(
            seg.name,
            f"{seg.velocity_fps:.2f}",
            f"{seg.elevation_ft:.1f}",
            f"{seg.friction_loss_ft:.3f}",
        )

    table.add_section()
    table.add_row("Static head", "-", f"{head.total_elevation_ft:.1f}", "-")
    table.add_row("Friction", "-", "-", f"{head.total_friction_ft:.3f}")
    if head.emitter_pressure_ft:
        table.add_row("Emitter pressure", "-", "-", f"{head.emitter_pressure_ft:.1f}")
    table.add_row(
        "[bold]Total TDH[/bold]",
        "",
        "",
        f"[bold]{head.tdh_ft:.1f} ft ({head.tdh_psi:.1f} PSI)[/bold]",
    )
    return table


def display_report(report: DesignReport, error_factor: float) -> None:
    """Render the full report to the console."""
    name = report.inputs.project_name or "Untitled Project"
    console.print()
    console.print(Panel(
        f"[bold cyan]SDI DESIGN - PUMP SIZING[/bold cyan]\n[white]{name}[/white]",
        box=box.DOUBLE,
        border_style="cyan",
        padding=(1, 2),
    ))

    flows = report.zone_flows
    zone = Table(title="[bold yellow]Zone Flows[/bold yellow]", box=box.SIMPLE)
    zone.add_column("Quantity", style="white")
    zone.add_column("Value", justify="right", style="green")
    zone.add_row("Emitters per lateral", str(flows.emitters_per_lateral))
    zone.add_row("Flow per lateral", f"{flows.flow_per_lateral_gpm:.3f} GPM")
    zone.add_row("Dispersal flow", f"{flows.dispersal_flow_gpm:.2f} GPM")
    zone.add_row("Flush flow per lateral", f"{flows.flush_flow_per_lateral_gpm:.3f} GPM")
    zone.add_row("Total flush flow", f"{flows.total_flush_flow_gpm:.2f} GPM")
    console.print(zone)

    console.print(mode_table(report.tdh.dispersal))
    console.print(mode_table(report.tdh.flushing))

    pump = report.pump_criteria(error_factor)
    summary = Text()
    summary.append("  Design flow:         ", style="white")
    summary.append(f"{pump['design_flow_gpm']:.2f} GPM\n", style="bold green")
    summary.append("  Design TDH:          ", style="white")
    summary.append(
        f"{pump['design_tdh_ft']:.1f} ft ({pump['design_tdh_psi']:.1f} PSI)\n",
        style="bold green",
    )
    summary.append("  Limiting condition:  ", style="white")
    summary.append(f"{pump['limiting_condition']}\n", style="bold yellow")
    summary.append(f"  (Error factor x{error_factor:g} applied to TDH)", style="dim")
    console.print(Panel(summary, title="Pump Selection Criteria", border_style="green", box=box.DOUBLE))

    site = report.site
    adequacy = "[green]adequate[/green]" if site.area_adequate else "[red]insufficient[/red]"
    console.print(
        f"Area: {site.required_area_sqft:,.0f} ft² required of {site.total_area_sqft:,.0f} ft² "
        f"({site.area_utilization_percent:.1f}%, {adequacy}) | "
        f"Dose: {site.gallons_per_zone_per_cycle:.1f} gal/zone/cycle, {site.dose_time_minutes:.1f} min"
    )

    if report.feedback:
        console.print()
        for item in report.feedback:
            style = SEVERITY_STYLES[item.severity]
            console.print(f"[{style}]{item.severity.value.upper():<10}[/{style}] {item.title}: {item.message}")
    else:
        console.print("\n[green]✓ No design findings[/green]")
    console.print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="SDI pump sizing report")
    parser.add_argument("design", type=Path, help="Path to a JSON design file")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--error-factor",
        type=float,
        default=None,
        help=f"Fittings contingency multiplier on TDH (default {settings.error_factor})",
    )
    args = parser.parse_args(argv)

    try:
        request = load_design(args.design)
    except FileNotFoundError:
        console.print(f"[red]✗ Design file not found: {args.design}[/red]")
        return 1
    except json.JSONDecodeError as e:
        console.print(f"[red]✗ Invalid JSON in {args.design}: {e}[/red]")
        return 1
    except ValidationError as e:
        console.print(f"[red]✗ Invalid design input:[/red]\n{e}")
        return 1

    if args.error_factor is not None:
        error_factor = args.error_factor
    elif request.error_factor is not None:
        error_factor = request.error_factor
    else:
        error_factor = settings.error_factor

    report = run_design(request.inputs.to_inputs(), request.to_segments())

    if args.json:
        console.print_json(data=report.to_dict(error_factor=error_factor))
    else:
        display_report(report, error_factor)
    return 0


if __name__ == "__main__":
    sys.exit(main())
