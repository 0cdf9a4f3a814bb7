class RBFAccuracyWarning(UserWarning):
    """Warning when solved weights reproduce the system poorly."""

    pass
