"""A small window and image layer: images, PNG and XPM42 textures, render queue and hooks."""