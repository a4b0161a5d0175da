"""Theme and style constants for the GUI.

This module defines the visual styling constants used throughout the editor.
All GUI components should reference these constants to maintain consistent styling.

Constants:
    COLORS: Color palette for buttons, text, and UI elements
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default and minimum window dimensions
"""

# Color palette - semantic color names for consistent theming
COLORS = {
    "primary": "#1f538d",        # Main action buttons (blue)
    "primary_hover": "#14375e",  # Primary button hover state
    "success": "#2d8a4e",        # Save actions (green)
    "success_hover": "#1e5c34",  # Success button hover state
    "danger": "#dc3545",         # Delete actions (red)
    "danger_hover": "#a71d2a",   # Danger button hover state
    "warning": "#ffc107",        # Unsaved changes indicator (yellow)
    "muted": "#6c757d",          # Secondary text (gray)
    "selected": ("#d0e2f5", "#2b4a6f"),  # Selected list row (light, dark)
    "invalid": "#dc3545",        # Border of fields that failed validation
}

# Font configurations - tuple format: (family, size, weight)
FONTS = {
    "title": ("Segoe UI", 18, "bold"),   # Window titles, major headings
    "heading": ("Segoe UI", 14, "bold"), # Section headers
    "body": ("Segoe UI", 12),            # Standard body text
    "small": ("Segoe UI", 10),           # Captions, status text
}

# Padding and spacing values in pixels
PADDING = {
    "small": 6,    # Between a label and its field
    "medium": 12,  # Between form rows and sections
    "large": 20,   # Window margins
}

# Window sizes - tuple format: (width, height)
WINDOW_SIZES = {
    "main": (1100, 720),     # Main window default size
    "min_main": (900, 600),  # Minimum main window size
    "list_width": 260,       # Width of the entry list beside each form
}
