from chartnorm.adapters.normalize import coerce_dataset, is_nested_dataset

__all__ = ["coerce_dataset", "is_nested_dataset"]
