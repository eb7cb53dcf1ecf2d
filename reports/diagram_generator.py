"""
Diagram generator for visualization of sun profiles.
"""

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import numpy as np

from models.sun_state import DayProfile


class DiagramGenerator:
    """Generates diagrams for sun day profiles."""

    def __init__(self, dpi: int = 150):
        """
        Initialize diagram generator.

        Args:
            dpi: Resolution for diagrams
        """
        self.dpi = dpi

    def generate_sun_path_diagram(
        self,
        profile: DayProfile,
        output_path: Optional[str] = None,
        night_altitude: float = -12.0
    ) -> Figure:
        """
        Generate sun altitude and light intensity diagram for a day.

        Args:
            profile: Day profile to plot
            output_path: Optional path to save diagram
            night_altitude: Altitude marked as the light-off threshold

        Returns:
            Matplotlib figure
        """
        if not profile.samples:
            raise ValueError("Profile has no samples")

        hours = np.array([
            s.time.hour + s.time.minute / 60.0 + s.time.second / 3600.0
            for s in profile.samples
        ])
        altitudes = np.array([s.altitude_degrees for s in profile.samples])
        intensities = np.array([s.intensity for s in profile.samples])

        fig, ax = plt.subplots(figsize=(10, 6))

        ax.plot(hours, altitudes, color='orange', label='Sun altitude')
        ax.axhline(0.0, color='gray', linewidth=1, label='Horizon')
        ax.axhline(night_altitude, color='gray', linestyle=':', linewidth=1,
                   label=f'Light off ({night_altitude:g} deg)')
        ax.fill_between(hours, altitudes, 0.0, where=altitudes > 0, color='gold', alpha=0.2)
        ax.set_xlim(0, 24)
        ax.set_xlabel('Hour of day')
        ax.set_ylabel('Altitude (deg)')
        ax.set_title(
            f'Sun path {profile.calculation_date} '
            f'(lat {profile.latitude:.2f}, lon {profile.longitude:.2f})'
        )
        ax.grid(alpha=0.3)

        intensity_ax = ax.twinx()
        intensity_ax.plot(hours, intensities, color='steelblue', linestyle='--', label='Intensity')
        intensity_ax.set_ylim(-0.05, 1.05)
        intensity_ax.set_ylabel('Light intensity')

        lines, labels = ax.get_legend_handles_labels()
        more_lines, more_labels = intensity_ax.get_legend_handles_labels()
        ax.legend(lines + more_lines, labels + more_labels, loc='upper left')

        fig.tight_layout()

        if output_path:
            fig.savefig(output_path, dpi=self.dpi, bbox_inches='tight')

        return fig
