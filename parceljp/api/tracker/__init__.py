from .tracker import TrackerHandler
