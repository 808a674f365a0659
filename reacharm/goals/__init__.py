"""Task goals scored against a world object: ReachPose, PickObject, PlaceInBin, Stack, and All/Any/Not."""

__all__ = ["composite", "pick_object", "place_in_bin", "reach_pose", "stack"]