from __future__ import annotations

# Pinned so a rollout is reproducible from the same commit.
DEPLOYER_PACKAGE = "@springworks/ecs-deployer@2.26.0"
DEPLOYER_BIN = "ecs-deployer"

NOTIFIER_PACKAGE = "deployment-notifier"
NOTIFIER_BIN = "deployment-completed"
