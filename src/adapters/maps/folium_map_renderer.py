from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from pathlib import Path

import folium

from src.app.ports.output import IMapRenderer
from src.domain.models import RouteResult, Stop

logger = logging.getLogger(__name__)


def _popup_html(stop: Stop) -> str:
    parts = [
        f"<b>{html.escape(stop.name or stop.id)}</b>",
        f"id: {html.escape(stop.id)}",
    ]
    if stop.description:
        parts.append(html.escape(stop.description))
    parts.append(f"{stop.lat}, {stop.lon}")
    return "<br>".join(parts)


@dataclass(slots=True)
class FoliumMapRenderer(IMapRenderer):
    """Leaflet map (via folium) of a route result."""

    tiles: str = "cartodbpositron"
    route_color: str = "#1f6feb"
    fallback_color: str = "#888888"
    zoom_start: int = 13

    def build_map(self, result: RouteResult) -> folium.Map:
        path = result.path
        if not path:
            return folium.Map(location=[0.0, 0.0], zoom_start=2, tiles=self.tiles)

        mean_lat = sum(s.lat for s in path) / len(path)
        mean_lon = sum(s.lon for s in path) / len(path)
        m = folium.Map(
            location=[mean_lat, mean_lon], zoom_start=self.zoom_start, tiles=self.tiles
        )

        points = [[s.lat, s.lon] for s in path]
        if len(points) >= 2:
            if result.stops:
                folium.PolyLine(
                    points,
                    color=self.route_color,
                    weight=5,
                    opacity=0.8,
                    tooltip=f"Trip {result.trip_id}" if result.trip_id else None,
                ).add_to(m)
            else:
                # No trip found: straight line between the endpoints.
                folium.PolyLine(
                    points,
                    color=self.fallback_color,
                    weight=3,
                    opacity=0.7,
                    dash_array="6,8",
                    tooltip="Direct line (no common trip)",
                ).add_to(m)

        for stop in path[1:-1]:
            folium.CircleMarker(
                location=[stop.lat, stop.lon],
                radius=5,
                color=self.route_color,
                fill=True,
                fill_opacity=0.9,
                popup=folium.Popup(_popup_html(stop), max_width=250),
                tooltip=html.escape(stop.name or stop.id),
            ).add_to(m)

        endpoints = [(path[0], "green", "Origin")]
        if len(path) > 1:
            endpoints.append((path[-1], "red", "Destination"))
        for stop, color, label in endpoints:
            folium.Marker(
                location=[stop.lat, stop.lon],
                popup=folium.Popup(_popup_html(stop), max_width=250),
                tooltip=f"{label}: {html.escape(stop.name or stop.id)}",
                icon=folium.Icon(color=color),
            ).add_to(m)

        if len(points) >= 2:
            lats = [p[0] for p in points]
            lons = [p[1] for p in points]
            m.fit_bounds([[min(lats), min(lons)], [max(lats), max(lons)]])
        return m

    def render(self, result: RouteResult) -> str:
        return self.build_map(result).get_root().render()

    def save(self, result: RouteResult, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.render(result), encoding="utf-8")
        logger.info("Wrote route map to %s", out)
        return out
