class OpType:
    # --- Input ---
    INPUT = "Input"
    CONSTANT = "Constant"

    # --- Manipulation ---
    SLICE = "Slice"
