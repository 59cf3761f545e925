"""Card dealing, hand/draw evaluation and the decision heuristics."""
