# Vision package
# Landmark detection adapters and heuristic mood/posture classification
