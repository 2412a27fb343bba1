"""Monster Hunter: fight random monsters until you die or reach level 20."""
