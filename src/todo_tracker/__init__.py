"""In-memory todo tracker: store -> service -> controller."""
