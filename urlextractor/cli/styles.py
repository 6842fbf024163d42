"""
CSS styles for URL Extractor CLI components
"""

MAIN_APP_CSS = """
Screen {
    background: $background;
}

#main-container {
    height: 100%;
    layout: vertical;
    padding: 0 1 1 1;
}

#extract-section {
    height: auto;
    margin: 1 0;
    border: round $primary;
    padding: 0 1;
}

#section-title {
    text-style: bold;
    height: 1;
}

#results-header {
    height: 1;
    margin: 0 1;
}

#results-title {
    width: 1fr;
    text-style: bold;
}

#status-counts {
    color: $text-muted;
}

#status-bar {
    height: 1;
    color: $text-muted;
    padding: 0 1;
}
"""
