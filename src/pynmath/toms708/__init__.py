from .bratio import bratio, incomplete_beta, select_branch, Branch, BratioResult

__all__ = ["bratio", "incomplete_beta", "select_branch", "Branch", "BratioResult"]
