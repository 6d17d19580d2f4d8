"""Telemetry snapshots and the Risk of Harm, Risk of Danger, lifeforce and eco-impact calculations."""