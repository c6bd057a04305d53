from typing import List

import hypothesis.strategies
import torch


def _float64_devices() -> List[str]:
    # Grids default to float64, which MPS cannot hold.
    devices = ["cpu"]
    if torch.cuda.is_available():
        devices.append("cuda")
    return devices


def available_devices() -> hypothesis.strategies.SearchStrategy[str]:
    """Strategy for device types that can hold a float64 grid."""
    return hypothesis.strategies.sampled_from(_float64_devices())
