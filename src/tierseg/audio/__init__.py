from .source import (
    ArraySampleSource,
    PydubSampleSource,
    SampleSource,
    load_sample_source,
    reduce_to_peaks,
)

__all__ = [
    "SampleSource",
    "ArraySampleSource",
    "PydubSampleSource",
    "load_sample_source",
    "reduce_to_peaks",
]
