"""命令处理模块"""
