"""Configuration and menu actions of a disk utility that runs shell commands on tagged files."""