"""
Background workers for the GUI.
"""
from PySide6.QtCore import QThread, Signal

from weld_toolkit.advisory import WeldAdvisor
from weld_toolkit.core.models.params import WeldingParams
from weld_toolkit.core.models.results import CalculationResult


class AdvisoryWorker(QThread):
    """
    Runs one advisory request off the UI thread.

    Emits analysisReady(text, result) with the result the request was made
    for, so the session can drop the reply if the calculation moved on.
    """
    analysisReady = Signal(str, object)

    def __init__(self, advisor: WeldAdvisor, params: WeldingParams, result: CalculationResult, parent=None):
        super().__init__(parent)
        self.advisor = advisor
        self.params = params
        self.result = result

    def run(self):
        text = self.advisor.analyze(self.params, self.result)
        self.analysisReady.emit(text, self.result)
