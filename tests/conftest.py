import matplotlib

# Offscreen backend for renderer tests
matplotlib.use("Agg")
