from gedcom_importer.sosa.calculator import SosaCalculator, SosaState, compute_sosa_numbers

__all__ = ["SosaCalculator", "SosaState", "compute_sosa_numbers"]
