"""
PR AI Teammate

Pull Request 변경사항을 분석해 자동 리뷰 코멘트를 만드는 분석 코어
"""

__version__ = "1.0.0"

from .api import ReviewPipeline, PipelineResult

__all__ = ["ReviewPipeline", "PipelineResult"]
