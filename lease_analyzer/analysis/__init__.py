from lease_analyzer.analysis.analyzer import ContractAnalyzer
from lease_analyzer.analysis.base import BaseContractAnalyzer
from lease_analyzer.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "BaseContractAnalyzer", "ContractAnalyzer"]
