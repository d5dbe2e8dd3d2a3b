"""
tilebook - 图片合订本生成工具

模块结构：
- config/     运行期配置加载
- models/     数据模型定义
- assembler/  文档组装（模板/前后附页/图片落位/乱序/输出）
- pipeline/   图片发现与多目录批处理
- cli         命令行入口
"""

__version__ = "0.1.0"
