from .segmenter import AnnotationFileConfig, SegmenterConfig, load_segmenter_config

__all__ = ["AnnotationFileConfig", "SegmenterConfig", "load_segmenter_config"]
