"""Command line entry point for ghostmap.

Small utilities over the library: a demo run, distance and projection
calculations, and GeoJSON conversion.

Usage:
    ghostmap demo
    ghostmap distance --lat1 52.2296756 --lng1 21.0122287 --lat2 41.89193 --lng2 12.51133
    ghostmap project --lat 40.7128 --lng -74.0060
    ghostmap to-geojson --lat 40.7128 --lng -74.0060
    ghostmap parse '{"type":"Point","coordinates":[-74.006,40.7128]}'
    ghostmap --help
"""

import logging

import typer

from ghostmap.config import LoggingConfig
from ghostmap.geojson import parse_geometry, point_to_geojson
from ghostmap.models import BoundingBox, GeometryKind, Point
from ghostmap.spatial import distance, polygon_area, project_to_web_mercator
from ghostmap.validation import GhostmapError

logger = logging.getLogger(__name__)

app = typer.Typer(help="Geospatial primitives: distance, projection and GeoJSON")

NEW_YORK = (40.7128, -74.0060)
ROME = (41.8919300, 12.5113300)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from LoggingConfig (GHOSTMAP_LOG_* variables)."""
    config = LoggingConfig()
    level = logging.DEBUG if verbose else config.level
    logging.basicConfig(level=level, format=config.format)


def _point(lat: float, lng: float) -> Point:
    try:
        return Point.create(lat, lng)
    except GhostmapError as e:
        logger.error(f"Invalid coordinate: {e}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """ghostmap command line tools."""
    configure_logging(verbose)


@app.command()
def demo():
    """Create a point, project it and measure its distance to Rome."""
    point = _point(*NEW_YORK)
    typer.echo(f"Created point: lat={point.lat}, lng={point.lng}")

    mercator = project_to_web_mercator(point)
    typer.echo(f"Web Mercator: x={mercator.x:.3f}, y={mercator.y:.3f}")

    rome = _point(*ROME)
    typer.echo(f"Distance to Rome: {point.distance_to(rome):.3f} km")


@app.command("distance")
def distance_command(
    lat1: float = typer.Option(..., "--lat1", help="Latitude of the first point"),
    lng1: float = typer.Option(..., "--lng1", help="Longitude of the first point"),
    lat2: float = typer.Option(..., "--lat2", help="Latitude of the second point"),
    lng2: float = typer.Option(..., "--lng2", help="Longitude of the second point"),
):
    """Print the great-circle distance between two points in kilometres."""
    a = _point(lat1, lng1)
    b = _point(lat2, lng2)
    typer.echo(f"{distance(a, b):.3f} km")


@app.command()
def project(
    lat: float = typer.Option(..., "--lat", help="Latitude (degrees)"),
    lng: float = typer.Option(..., "--lng", help="Longitude (degrees)"),
):
    """Print the Web Mercator (EPSG:3857) position of a point in metres."""
    mercator = project_to_web_mercator(_point(lat, lng))
    typer.echo(f"x={mercator.x:.3f} y={mercator.y:.3f}")


@app.command("to-geojson")
def to_geojson(
    lat: float = typer.Option(..., "--lat", help="Latitude (degrees)"),
    lng: float = typer.Option(..., "--lng", help="Longitude (degrees)"),
    precision: int = typer.Option(6, "--precision", "-p", min=0, max=17, help="Decimal digits"),
):
    """Print a point as a GeoJSON Point."""
    typer.echo(point_to_geojson(_point(lat, lng), precision=precision))


@app.command()
def parse(
    geojson: str = typer.Argument(..., help="GeoJSON Point, LineString or Polygon text"),
):
    """Parse a GeoJSON geometry and print a summary of it."""
    try:
        geometry = parse_geometry(geojson)
    except GhostmapError as e:
        logger.error(f"Cannot parse GeoJSON: {e}")
        raise typer.Exit(1) from None

    points = [geometry.value] if geometry.kind == GeometryKind.POINT else list(geometry.value)
    bbox = BoundingBox.from_polygon(points)

    typer.echo(f"Type: {geometry.kind.value}")
    typer.echo(f"Points: {len(points)}")
    typer.echo(
        f"Bounds: lat [{bbox.min_lat}, {bbox.max_lat}], lng [{bbox.min_lng}, {bbox.max_lng}]"
    )
    if geometry.kind == GeometryKind.POLYGON:
        typer.echo(f"Area: {polygon_area(points):.6f} square degrees")


if __name__ == "__main__":
    app()
