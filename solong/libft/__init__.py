"""Line reading, string helpers and printf-style formatting."""