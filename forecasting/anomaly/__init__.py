"""
Anomaly detection for the forecasting core, flagging historical samples whose z-score exceeds a threshold.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.anomaly.detection import detect_anomalies, z_scores

__all__ = ["detect_anomalies", "z_scores"]
